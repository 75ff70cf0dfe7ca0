"""Output renderers for picked theme entries.

Renderers:
- Plain: "<show>: <theme>" per line
- Table: bordered Show/Type/Theme columns with a header and rule (PrettyTable)
- CSV: Show,Type,Theme rows with standard quoting
"""

import csv
import io
from abc import ABC, abstractmethod
from typing import Protocol, Sequence, runtime_checkable

from prettytable import PrettyTable

from .config import OutputMode
from .models import ThemeEntry

HEADER = ("Show", "Type", "Theme")


def _row(entry: ThemeEntry) -> tuple[str, str, str]:
    return (entry.show_title, entry.kind.value, entry.text)


@runtime_checkable
class Renderer(Protocol):
    """Protocol for output renderers."""

    @property
    def name(self) -> str:
        """Renderer identifier."""
        ...

    def render(self, entries: Sequence[ThemeEntry]) -> str:
        """Render entries to text.

        Args:
            entries: Picked entries in output order

        Returns:
            Rendered text, newline-terminated unless empty
        """
        ...


class BaseRenderer(ABC):
    """Abstract base class for renderers."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def render(self, entries: Sequence[ThemeEntry]) -> str:
        pass


class PlainRenderer(BaseRenderer):
    """Minimal human-readable output. The theme kind is not shown."""

    @property
    def name(self) -> str:
        return "plain"

    def render(self, entries: Sequence[ThemeEntry]) -> str:
        return "".join(f"{entry.show_title}: {entry.text}\n" for entry in entries)


class TableRenderer(BaseRenderer):
    """Bordered table with a header row and a separating rule.

    Every line of one render has the same length. Cells wider than
    `max_column_width` wrap onto extra lines within their row.
    """

    def __init__(self, max_column_width: int | None = None):
        """Initialize the table renderer.

        Args:
            max_column_width: Wrap cells longer than this many characters
        """
        if max_column_width is not None and max_column_width < 1:
            raise ValueError("max_column_width must be a positive integer")
        self.max_column_width = max_column_width

    @property
    def name(self) -> str:
        return "table"

    def build(self, entries: Sequence[ThemeEntry]) -> PrettyTable:
        """Build the PrettyTable for the entries."""
        table = PrettyTable(field_names=list(HEADER))
        table.align = "l"
        if self.max_column_width is not None:
            table.max_width = self.max_column_width
        table.add_rows([list(_row(entry)) for entry in entries])
        return table

    def render(self, entries: Sequence[ThemeEntry]) -> str:
        return self.build(entries).get_string() + "\n"


class CsvRenderer(BaseRenderer):
    """CSV with a header row. Fields are quoted only when they need it."""

    @property
    def name(self) -> str:
        return "csv"

    def render(self, entries: Sequence[ThemeEntry]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
        writer.writerow(HEADER)
        writer.writerows(_row(entry) for entry in entries)
        return buffer.getvalue()


def get_renderer(mode: OutputMode, max_column_width: int | None = None) -> Renderer:
    """Get the renderer for an output mode.

    Args:
        mode: Selected output mode
        max_column_width: Only used by the table renderer
    """
    if mode is OutputMode.TABLE:
        return TableRenderer(max_column_width)
    if mode is OutputMode.CSV:
        return CsvRenderer()
    return PlainRenderer()


def render(
    entries: Sequence[ThemeEntry],
    mode: OutputMode = OutputMode.PLAIN,
    *,
    max_column_width: int | None = None,
) -> str:
    """Render entries in the given output mode."""
    return get_renderer(mode, max_column_width).render(entries)
