"""Flatten a catalog into individually pickable theme entries."""

from dataclasses import dataclass, field

from .logging import get_logger
from .models import AllowList, Catalog, Show, ThemeEntry

logger = get_logger(__name__)


@dataclass
class EligibleShows:
    """Shows split by the allow-list."""

    included: list[tuple[int, Show]] = field(default_factory=list)
    excluded: list[int] = field(default_factory=list)
    missing: list[int] = field(default_factory=list)


def select_shows(catalog: Catalog, allow_list: AllowList | None = None) -> EligibleShows:
    """Apply the allow-list to the catalog.

    Args:
        catalog: Loaded catalog
        allow_list: Show IDs to keep, or None to keep every show

    Returns:
        EligibleShows with included shows in catalog order, excluded IDs,
        and allow-list IDs that are not in the catalog
    """
    result = EligibleShows()
    for show_id, show in catalog.items():
        if allow_list is not None and show_id not in allow_list:
            result.excluded.append(show_id)
        else:
            result.included.append((show_id, show))

    if allow_list is not None:
        result.missing = sorted(allow_list.difference(catalog))
        if result.missing:
            logger.info("allow_list_ids_not_in_catalog", ids=result.missing)

    return result


def entries_for_show(show_id: int, show: Show) -> list[ThemeEntry]:
    """One entry per theme song of a single show."""
    return [
        ThemeEntry(show_id=show_id, show_title=show.title, kind=kind, text=text)
        for kind, text in show.themes()
    ]


def flatten_themes(catalog: Catalog, allow_list: AllowList | None = None) -> list[ThemeEntry]:
    """Produce every theme entry eligible for sampling.

    Shows are visited in catalog order, which carries no meaning beyond the
    order of the input document. Within a show, openings come first, then
    endings, then other soundtrack songs, each in their original order.
    A show without themes contributes nothing.
    """
    eligible = select_shows(catalog, allow_list)

    entries: list[ThemeEntry] = []
    for show_id, show in eligible.included:
        entries.extend(entries_for_show(show_id, show))

    logger.info(
        "themes_flattened",
        shows=len(eligible.included),
        excluded_shows=len(eligible.excluded),
        entries=len(entries),
    )
    return entries
