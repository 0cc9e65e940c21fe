"""Minimum coverage enforcement.

Compares the coverage of every package, type and method against the
configured minimum percentages and reports each element that falls
short.
"""

import logging
from dataclasses import dataclass

from doccov.stats.project import ProjectStats
from doccov.utils.config import CoverageLimits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LimitViolation:
    """An element whose coverage is below the required minimum.

    Attributes:
        kind: Kind label of the element (Package, Class, Method, ...).
        name: Qualified name of the element.
        percent: Actual coverage percentage.
        minimum: Required minimum percentage.
    """

    kind: str
    name: str
    percent: float
    minimum: float

    def describe(self) -> str:
        return (
            f"{self.kind} {self.name}: {self.percent:.2f}% "
            f"is below the minimum of {self.minimum:.2f}%"
        )


def check_limits(project: ProjectStats, limits: CoverageLimits) -> list[LimitViolation]:
    """Find every element whose coverage is below its minimum.

    Interfaces are checked against ``min_interface``; classes, enums and
    annotation types against ``min_class``. Constructors count as methods.

    Args:
        project: The coverage tree.
        limits: Minimum coverage percentages.

    Returns:
        Violations in tree order, empty when all limits are met.
    """
    violations: list[LimitViolation] = []

    for package in project.packages:
        if package.percent < limits.min_package:
            violations.append(
                LimitViolation(
                    package.kind, package.name, package.percent, limits.min_package
                )
            )

        for type_stats in package.types:
            minimum = (
                limits.min_interface if type_stats.is_interface else limits.min_class
            )
            if type_stats.percent < minimum:
                violations.append(
                    LimitViolation(
                        type_stats.kind,
                        type_stats.qualified_name,
                        type_stats.percent,
                        minimum,
                    )
                )

            for method in (*type_stats.constructors, *type_stats.methods):
                if method.percent < limits.min_method:
                    signature = method.method.display_signature
                    violations.append(
                        LimitViolation(
                            method.kind,
                            f"{type_stats.qualified_name}.{signature}",
                            method.percent,
                            limits.min_method,
                        )
                    )

    for violation in violations:
        logger.debug("Coverage limit violated: %s", violation.describe())
    return violations
