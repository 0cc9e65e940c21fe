"""Markdown output for documentation coverage reports.

Generates a single Markdown file with a project summary, one table of
types per package and one table of methods per type.
"""

import logging
from pathlib import Path

from doccov.stats.base import DocStats
from doccov.stats.package import PackageStats
from doccov.stats.project import ProjectStats
from doccov.stats.type_stats import TypeStats

logger = logging.getLogger(__name__)

_TABLE_HEADER = [
    "| Element | Kind | Documentable | Documented | Coverage |",
    "|---------|------|-------------:|-----------:|---------:|",
]


class MarkdownWriter:
    """Writes a coverage report as a Markdown file."""

    def __init__(self, output_dir: str = ".") -> None:
        """Initialize the Markdown writer.

        Args:
            output_dir: Directory where the report will be written.
        """
        self.output_dir = Path(output_dir)

    def write_report(self, project: ProjectStats, name: str = "doc-coverage") -> Path:
        """Write the coverage report to ``<output_dir>/<name>.md``.

        Args:
            project: The coverage tree.
            name: Report file name without extension.

        Returns:
            Path to the written Markdown file.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        md_path = self.output_dir / f"{name}.md"
        md_path.write_text(self.render(project), encoding="utf-8")

        logger.info("Wrote Markdown coverage report: %s", md_path)
        return md_path

    def render(self, project: ProjectStats) -> str:
        """Render the coverage report as Markdown.

        Args:
            project: The coverage tree.

        Returns:
            Markdown string for the whole report.
        """
        title = "Documentation Coverage"
        if project.name:
            title = f"{title}: {project.name}"
        lines = [f"# {title}\n"]

        lines.append(f"**Coverage:** {project.percent:.2f}%  ")
        lines.append(
            f"**Documented units:** {project.documented} of {project.documentable}  "
        )
        lines.append(
            f"**Packages:** {len(project.packages)} "
            f"({project.documented_packages} documented)  "
        )
        lines.append(
            f"**Types:** {project.types} ({project.documented_types} documented)\n"
        )

        if project.config.public_only:
            lines.append("*Only public elements are counted.*\n")

        for package in project.packages:
            lines.append(self._render_package(package))

        return "\n".join(lines)

    def _render_package(self, package: PackageStats) -> str:
        lines = [f"## Package `{package.name}`\n"]
        lines.append(f"Coverage: **{package.percent:.2f}%**\n")

        if package.types:
            lines.extend(_TABLE_HEADER)
            for type_stats in package.types:
                lines.append(self._row(type_stats.name, type_stats))
            lines.append("")

        for type_stats in package.types:
            lines.append(self._render_type(type_stats))

        return "\n".join(lines)

    def _render_type(self, type_stats: TypeStats) -> str:
        lines = [f"### {type_stats.kind} `{type_stats.qualified_name}`\n"]
        if not type_stats.is_documented:
            lines.append("*No description.*\n")

        lines.extend(_TABLE_HEADER)
        groups = (type_stats.fields, type_stats.enum_constants, type_stats.annotations)
        for group in groups:
            if group.documentable:
                lines.append(self._row(group.kind, group))
        for method in (*type_stats.constructors, *type_stats.methods):
            label = f"`{method.method.display_signature}`"
            if method.inherited:
                label += " (inherited)"
            lines.append(self._row(label, method))
        lines.append("")
        return "\n".join(lines)

    def _row(self, label: str, stats: DocStats) -> str:
        return (
            f"| {label} | {stats.kind} | {stats.documentable} | "
            f"{stats.documented} | {stats.percent:.2f}% |"
        )
