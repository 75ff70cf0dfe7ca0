"""Pydantic data models for random-show-themes.

Catalog records are validated against `Show` on load and never mutated
afterwards. `ThemeEntry` is the unit the sampler and renderers work on.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt


class ThemeKind(str, Enum):
    """Which theme list a song came from. The value is the display label."""

    OPENING = "Opening"
    ENDING = "Ending"
    OTHER = "Other"


class Show(BaseModel):
    """A catalog entry with its theme songs.

    Aliased fields resolve in candidate order: `mal_id` beats `id` and
    `other_soundtrack` beats `soundtrack` when a record carries both.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(
        gt=0,
        validation_alias=AliasChoices("mal_id", "id"),
        description="Show identifier (MyAnimeList ID in most catalogs)",
    )
    title: str = Field(description="Show title as displayed in output")
    url: str | None = Field(default=None, description="Source page, kept but unused")

    opening_themes: tuple[str, ...] = Field(default=(), description="Opening theme songs")
    ending_themes: tuple[str, ...] = Field(default=(), description="Ending theme songs")
    other_soundtrack: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("other_soundtrack", "soundtrack"),
        description="Any other soundtrack songs",
    )

    def themes(self) -> list[tuple[ThemeKind, str]]:
        """All theme songs tagged with their kind, openings first, then endings, then others."""
        return (
            [(ThemeKind.OPENING, text) for text in self.opening_themes]
            + [(ThemeKind.ENDING, text) for text in self.ending_themes]
            + [(ThemeKind.OTHER, text) for text in self.other_soundtrack]
        )

    @property
    def theme_count(self) -> int:
        return len(self.opening_themes) + len(self.ending_themes) + len(self.other_soundtrack)


# Keyed by the catalog's JSON object keys; iteration follows document order.
Catalog = dict[int, Show]

# None means "every show is eligible"; an empty set means "none are".
AllowList = frozenset[int]


class ThemeEntry(BaseModel):
    """A single pickable theme song."""

    model_config = ConfigDict(frozen=True)

    show_id: int = Field(description="Catalog key of the originating show")
    show_title: str = Field(description="Title of the originating show")
    kind: ThemeKind = Field(description="Theme list the song came from")
    text: str = Field(description="Theme song text as given in the catalog")


class PickResult(BaseModel):
    """Outcome of one run of the pipeline, before rendering."""

    entries: list[ThemeEntry] = Field(description="Sampled entries in output order")
    requested: int = Field(ge=1, description="Number of entries asked for")
    available: int = Field(ge=0, description="Number of eligible entries before sampling")
    eligible_shows: int = Field(ge=0, description="Eligible shows with at least one theme")
    strategy: str = Field(description="Sampling strategy used")

    @property
    def shortfall(self) -> int:
        """How many fewer entries were produced than requested."""
        return max(0, self.requested - len(self.entries))
