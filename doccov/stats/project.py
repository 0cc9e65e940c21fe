"""Project-wide documentation coverage.

The project total is the sum of its packages' units. Its percentage is
therefore weighted by package size and is never a mean of the package
percentages.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from doccov.model.structure import DocModel
from doccov.stats.base import DocStats
from doccov.stats.method import MethodStats, OverrideResolver
from doccov.stats.package import PackageStats
from doccov.stats.type_stats import TypeStats
from doccov.utils.config import CoverageConfig

logger = logging.getLogger(__name__)


class ProjectStats(DocStats):
    """Root of the coverage tree.

    Attributes:
        packages: Coverage of every package in the snapshot.
        config: Options the tree was built with.
    """

    kind = "Project"

    def __init__(
        self,
        model: DocModel,
        config: Optional[CoverageConfig] = None,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.config = config or CoverageConfig()
        resolver = OverrideResolver(model)
        self.packages = [
            PackageStats(package, self.config, resolver)
            for package in model.list_packages()
        ]

    @property
    def children(self) -> Sequence[DocStats]:
        return self.packages

    def iter_types(self) -> Iterator[TypeStats]:
        for package in self.packages:
            yield from package.types

    def iter_methods(self) -> Iterator[MethodStats]:
        """Iterate over every counted constructor and method."""
        for type_stats in self.iter_types():
            yield from type_stats.constructors
            yield from type_stats.methods

    @property
    def types(self) -> int:
        return sum(len(p.types) for p in self.packages)

    @property
    def documented_types(self) -> int:
        return sum(1 for t in self.iter_types() if t.is_documented)

    @property
    def documented_packages(self) -> int:
        return sum(1 for p in self.packages if p.is_documented)


def compute_coverage(
    model: DocModel, config: Optional[CoverageConfig] = None, name: str = ""
) -> ProjectStats:
    """Build the coverage tree of a documentation model.

    Args:
        model: The documentation snapshot.
        config: Coverage options; defaults count every element.
        name: Optional project name for reports.

    Returns:
        The root ProjectStats node.
    """
    project = ProjectStats(model, config, name)
    logger.info(
        "Computed coverage of %d packages, %d types: %d/%d units documented (%.2f%%)",
        len(project.packages),
        project.types,
        project.documented,
        project.documentable,
        project.percent,
    )
    return project
