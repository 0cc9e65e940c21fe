"""Coverage of a package and the types it contains."""

from __future__ import annotations

import logging
from typing import Sequence

from doccov.model.structure import PackageInfo
from doccov.stats.base import DocStats, has_description, is_public
from doccov.stats.method import OverrideResolver
from doccov.stats.type_stats import TypeStats
from doccov.utils.config import CoverageConfig

logger = logging.getLogger(__name__)


class PackageStats(DocStats):
    """Coverage of a package: its own comment plus each included type.

    The package documentation unit is counted even when no type is left
    after public-only filtering.

    The resolver carries the documentation model the package belongs
    to. Types are listed through that model, and methods get override
    credit from ancestors anywhere in it.
    """

    kind = "Package"

    def __init__(
        self,
        package: PackageInfo,
        config: CoverageConfig,
        resolver: OverrideResolver,
    ) -> None:
        super().__init__(package.name)
        self.package = package

        declared = resolver.model.list_types(package)
        included = [t for t in declared if is_public(t) or not config.public_only]
        skipped = len(declared) - len(included)
        if skipped:
            logger.debug(
                "Package %s: skipped %d non-public types", package.name, skipped
            )

        self.types = [TypeStats(t, config, resolver) for t in included]

    @property
    def is_documented(self) -> bool:
        return has_description(self.package.comment)

    @property
    def children(self) -> Sequence[DocStats]:
        return self.types

    @property
    def own_documentable(self) -> int:
        return 1

    @property
    def own_documented(self) -> int:
        return int(self.is_documented)
