"""Run configuration built from command line options.

The tool reads no config files and no environment variables; everything a
run needs is carried by `RunConfig`.
"""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from .errors import UsageError


class OutputMode(str, Enum):
    """How picked themes are printed."""

    PLAIN = "plain"
    TABLE = "table"
    CSV = "csv"

    @classmethod
    def from_flags(cls, table: bool = False, csv: bool = False, readable: bool = False) -> "OutputMode":
        """Resolve the mutually exclusive output flags.

        Raises:
            UsageError: If more than one flag is set
        """
        selected = [
            flag
            for flag, enabled in (("--table", table), ("--csv", csv), ("--readable", readable))
            if enabled
        ]
        if len(selected) > 1:
            raise UsageError(f"options {' and '.join(selected)} cannot be used together")
        if table:
            return cls.TABLE
        if csv:
            return cls.CSV
        return cls.PLAIN


class RunConfig(BaseModel):
    """Validated options for a single run."""

    catalog_path: Path = Field(description="Catalog JSON file")
    allow_list_path: Path | None = Field(default=None, description="Optional allow-list JSON file")
    count: int = Field(ge=1, description="Number of themes to pick")

    output_mode: OutputMode = OutputMode.PLAIN
    table_width: int | None = Field(default=None, ge=1, description="Max table column width")
    strategy: Literal["uniform", "per-show"] = "uniform"
    hard_fail: bool = Field(default=False, description="Fail when fewer themes than requested")

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @model_validator(mode="after")
    def _table_width_requires_table(self) -> "RunConfig":
        if self.table_width is not None and self.output_mode is not OutputMode.TABLE:
            raise ValueError("--table-width requires --table")
        return self
