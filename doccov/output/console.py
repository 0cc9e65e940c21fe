"""Plain-text coverage report for the terminal."""

from doccov.stats.base import DocStats
from doccov.stats.method import MethodStats
from doccov.stats.project import ProjectStats
from doccov.stats.type_stats import TypeStats

_INDENT = "    "


def _counts(stats: DocStats) -> str:
    return (
        f"{stats.documentable:6d} Undocumented: {stats.undocumented:6d} "
        f"Documented: {stats.documented:6d} ({stats.percent:.2f}%)"
    )


def _render_group(stats: DocStats, depth: int) -> list[str]:
    # Empty groups are noise in a terminal report
    if stats.documentable == 0:
        return []
    return [f"{_INDENT * depth}{stats.kind + ':':<14}{_counts(stats)}"]


def _render_method(method: MethodStats, depth: int) -> list[str]:
    suffix = " [inherited]" if method.inherited else ""
    lines = [
        f"{_INDENT * depth}{method.kind}: {method.method.display_signature} "
        f"Documented: {method.is_documented} ({method.percent:.2f}%){suffix}"
    ]
    lines.extend(_render_group(method.params, depth + 1))
    lines.extend(_render_group(method.exceptions, depth + 1))
    return lines


def _render_type(type_stats: TypeStats, depth: int) -> list[str]:
    lines = [
        f"{_INDENT * depth}{type_stats.kind}: {type_stats.name} "
        f"Documented: {type_stats.is_documented} ({type_stats.percent:.2f}%)"
    ]
    for group in (type_stats.fields, type_stats.enum_constants, type_stats.annotations):
        lines.extend(_render_group(group, depth + 1))
    for method in (*type_stats.constructors, *type_stats.methods):
        lines.extend(_render_method(method, depth + 1))
    return lines


def render_console(project: ProjectStats) -> str:
    """Render the coverage tree as indented text.

    Args:
        project: The coverage tree.

    Returns:
        The report text, ending with a newline.
    """
    lines = []
    for package in project.packages:
        lines.append(
            f"Package {package.name} Documented: {package.is_documented} "
            f"({package.percent:.2f}%)"
        )
        for type_stats in package.types:
            lines.extend(_render_type(type_stats, 1))
        lines.append("")

    lines.append(
        f"{'Packages:':<14}{len(project.packages):6d} "
        f"Documented: {project.documented_packages:6d}"
    )
    lines.append(
        f"{'Types:':<14}{project.types:6d} "
        f"Documented: {project.documented_types:6d}"
    )
    lines.append(f"{'Units:':<14}{_counts(project)}")
    lines.append(f"Project Documentation Coverage: {project.percent:.2f}%")
    return "\n".join(lines) + "\n"
