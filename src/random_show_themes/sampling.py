"""Sampling strategies for picking theme entries.

Strategies:
- Uniform: N entries uniformly without replacement from all eligible themes
- PerShow: N distinct shows, then one theme from each
"""

import random
from abc import ABC, abstractmethod
from itertools import groupby
from typing import Protocol, Sequence, runtime_checkable

from .logging import get_logger
from .models import ThemeEntry

logger = get_logger(__name__)

# Process-wide generator, seeded from system entropy on import.
_rng = random.Random()


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")


def sample_entries(
    entries: Sequence[ThemeEntry],
    count: int,
    rng: random.Random | None = None,
) -> list[ThemeEntry]:
    """Draw up to `count` entries uniformly at random without replacement.

    Every subset of size min(count, len(entries)) is equally likely. When
    `count` covers the whole sequence the result is a shuffled copy of it.

    Args:
        entries: Flattened theme entries
        count: Number of entries requested (positive)
        rng: Random generator; defaults to the process-wide one

    Returns:
        Sampled entries in random order
    """
    _check_count(count)
    rng = rng or _rng
    return rng.sample(list(entries), min(count, len(entries)))


@runtime_checkable
class SamplingStrategy(Protocol):
    """Protocol for entry sampling strategies."""

    @property
    def name(self) -> str:
        """Strategy identifier."""
        ...

    def pick(
        self,
        entries: Sequence[ThemeEntry],
        count: int,
        rng: random.Random | None = None,
    ) -> list[ThemeEntry]:
        """Pick entries from the flattened sequence.

        Args:
            entries: Flattened theme entries in catalog order
            count: Number of entries requested
            rng: Optional random generator override

        Returns:
            Picked entries, never containing the same entry twice
        """
        ...


class BaseStrategy(ABC):
    """Abstract base class for sampling strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def pick(
        self,
        entries: Sequence[ThemeEntry],
        count: int,
        rng: random.Random | None = None,
    ) -> list[ThemeEntry]:
        pass


class UniformStrategy(BaseStrategy):
    """Every theme entry is equally likely, regardless of its show."""

    @property
    def name(self) -> str:
        return "uniform"

    def pick(
        self,
        entries: Sequence[ThemeEntry],
        count: int,
        rng: random.Random | None = None,
    ) -> list[ThemeEntry]:
        return sample_entries(entries, count, rng)


class PerShowStrategy(BaseStrategy):
    """Pick distinct shows first, then one theme within each.

    Shows with many themes are no more likely to be picked than shows with
    one. Returns at most one entry per show.
    """

    @property
    def name(self) -> str:
        return "per-show"

    def pick(
        self,
        entries: Sequence[ThemeEntry],
        count: int,
        rng: random.Random | None = None,
    ) -> list[ThemeEntry]:
        _check_count(count)
        rng = rng or _rng

        # Entries from one show are contiguous after flattening.
        by_show = [list(group) for _, group in groupby(entries, key=lambda e: e.show_id)]
        if count > len(by_show):
            logger.debug("per_show_fewer_shows", requested=count, shows=len(by_show))

        shows = rng.sample(by_show, min(count, len(by_show)))
        return [rng.choice(themes) for themes in shows]


STRATEGIES: dict[str, type[BaseStrategy]] = {
    "uniform": UniformStrategy,
    "per-show": PerShowStrategy,
}


def get_strategy(name: str) -> SamplingStrategy:
    """Get a sampling strategy by name.

    Args:
        name: "uniform" or "per-show"

    Raises:
        ValueError: If the name is unknown
    """
    strategy_class = STRATEGIES.get(name.lower())
    if not strategy_class:
        raise ValueError(f"unknown sampling strategy: {name}")
    return strategy_class()
