"""Pipeline orchestrator for random-show-themes.

Coordinates the full flow:
1. Load the catalog (and the allow-list, if given)
2. Flatten eligible shows into theme entries
3. Sample the requested number of entries
4. Render them in the selected output mode
"""

import random

from .config import RunConfig
from .errors import ShortfallError
from .flatten import flatten_themes
from .loaders import load_allow_list, load_catalog, read_json_source
from .logging import get_logger
from .models import AllowList, Catalog, PickResult
from .render import get_renderer
from .sampling import get_strategy

logger = get_logger(__name__)


class Pipeline:
    """Main pipeline orchestrator for random-show-themes."""

    def __init__(self, config: RunConfig, rng: random.Random | None = None):
        """Initialize the pipeline.

        Args:
            config: Validated run configuration
            rng: Optional random generator override (tests pass a seeded one)
        """
        self.config = config
        self.rng = rng
        self.strategy = get_strategy(config.strategy)
        self.renderer = get_renderer(config.output_mode, config.table_width)

    def load_catalog(self) -> Catalog:
        path = self.config.catalog_path
        return load_catalog(read_json_source(path), source=str(path))

    def load_allow_list(self) -> AllowList | None:
        """Load the allow-list, or None when no file was given."""
        path = self.config.allow_list_path
        if path is None:
            return None
        return load_allow_list(read_json_source(path), source=str(path))

    def pick(self) -> PickResult:
        """Load inputs and sample entries.

        Raises:
            ParseError: If an input file is unreadable or malformed
            SchemaError: If a show record has the wrong shape
            ShortfallError: If hard-fail is on and too few entries exist
        """
        catalog = self.load_catalog()
        allow_list = self.load_allow_list()

        entries = flatten_themes(catalog, allow_list)
        eligible_shows = len({entry.show_id for entry in entries})
        picked = self.strategy.pick(entries, self.config.count, self.rng)

        result = PickResult(
            entries=picked,
            requested=self.config.count,
            available=len(entries),
            eligible_shows=eligible_shows,
            strategy=self.strategy.name,
        )

        if result.shortfall:
            logger.warning(
                "count_exceeds_available",
                requested=result.requested,
                returned=len(result.entries),
                available=result.available,
                strategy=result.strategy,
            )
            if self.config.hard_fail:
                raise ShortfallError(
                    f"{result.requested} themes were requested but only "
                    f"{len(result.entries)} could be picked"
                )

        logger.info("themes_picked", count=len(result.entries), strategy=result.strategy)
        return result

    def run(self) -> str:
        """Run the full pipeline and return the rendered output."""
        result = self.pick()
        return self.renderer.render(result.entries)
