import random
from collections import Counter
from itertools import combinations

import pytest

from random_show_themes.models import ThemeEntry, ThemeKind
from random_show_themes.sampling import (
    PerShowStrategy,
    SamplingStrategy,
    UniformStrategy,
    get_strategy,
    sample_entries,
)


def _entries(*shows: tuple[int, int]) -> list[ThemeEntry]:
    """Build entries for (show_id, theme_count) pairs."""
    return [
        ThemeEntry(show_id=show_id, show_title=f"Show {show_id}", kind=ThemeKind.OPENING, text=f"{show_id}-{n}")
        for show_id, theme_count in shows
        for n in range(theme_count)
    ]


def test_sample_returns_requested_count_without_duplicates():
    entries = _entries((1, 3), (2, 4), (3, 3))

    picked = sample_entries(entries, 4, random.Random(7))

    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= set(entries)


def test_sample_count_at_or_above_size_returns_everything_shuffled():
    entries = _entries((1, 2), (2, 3))

    for count in (5, 6, 100):
        picked = sample_entries(entries, count, random.Random(count))
        assert len(picked) == len(entries)
        assert set(picked) == set(entries)


def test_sample_empty_sequence_returns_empty():
    assert sample_entries([], 3) == []


def test_sample_does_not_mutate_input():
    entries = _entries((1, 5))
    before = list(entries)

    sample_entries(entries, 5, random.Random(1))

    assert entries == before


@pytest.mark.parametrize("count", [0, -1])
def test_sample_rejects_non_positive_count(count):
    with pytest.raises(ValueError):
        sample_entries(_entries((1, 2)), count)


def test_sample_uses_default_generator():
    entries = _entries((1, 10))

    picked = sample_entries(entries, 3)

    assert len(set(picked)) == 3


def test_sample_subsets_are_uniform():
    entries = _entries((1, 4))
    rng = random.Random(20240501)
    trials = 6000

    counts = Counter(frozenset(sample_entries(entries, 2, rng)) for _ in range(trials))
    subsets = [frozenset(c) for c in combinations(entries, 2)]

    assert set(counts) == set(subsets)
    expected = trials / len(subsets)
    chi_square = sum((counts[s] - expected) ** 2 / expected for s in subsets)
    # Critical value for 5 degrees of freedom at p = 0.001.
    assert chi_square < 20.52


def test_spec_example_picks_two_distinct_entries():
    entries = [
        ThemeEntry(show_id=1, show_title="A", kind=ThemeKind.OPENING, text="X"),
        ThemeEntry(show_id=2, show_title="B", kind=ThemeKind.ENDING, text="Y"),
        ThemeEntry(show_id=2, show_title="B", kind=ThemeKind.ENDING, text="Z"),
    ]

    for seed in range(20):
        picked = sample_entries(entries, 2, random.Random(seed))
        assert len(picked) == 2
        assert len(set(picked)) == 2
        assert set(picked) <= set(entries)


def test_uniform_strategy_delegates_to_sample_entries():
    entries = _entries((1, 3), (2, 3))

    picked = UniformStrategy().pick(entries, 2, random.Random(3))

    assert picked == sample_entries(entries, 2, random.Random(3))


def test_per_show_strategy_picks_one_theme_per_show():
    entries = _entries((1, 5), (2, 1), (3, 2), (4, 3))

    for seed in range(20):
        picked = PerShowStrategy().pick(entries, 3, random.Random(seed))
        assert len(picked) == 3
        assert len({e.show_id for e in picked}) == 3
        assert set(picked) <= set(entries)


def test_per_show_strategy_caps_at_number_of_shows():
    entries = _entries((1, 5), (2, 2))

    picked = PerShowStrategy().pick(entries, 10, random.Random(0))

    assert sorted(e.show_id for e in picked) == [1, 2]


def test_per_show_strategy_empty_sequence():
    assert PerShowStrategy().pick([], 2) == []


def test_per_show_strategy_is_uniform_over_shows():
    entries = _entries((1, 9), (2, 1))
    rng = random.Random(99)

    counts = Counter(PerShowStrategy().pick(entries, 1, rng)[0].show_id for _ in range(2000))

    # A uniform pick over themes would choose show 1 about 90% of the time.
    assert 850 < counts[1] < 1150


def test_get_strategy():
    assert isinstance(get_strategy("uniform"), UniformStrategy)
    assert isinstance(get_strategy("per-show"), PerShowStrategy)
    assert isinstance(get_strategy("Per-Show"), PerShowStrategy)
    assert isinstance(get_strategy("uniform"), SamplingStrategy)


def test_get_strategy_unknown_name():
    with pytest.raises(ValueError, match="unknown sampling strategy"):
        get_strategy("weighted")
