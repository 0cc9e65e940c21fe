"""Standalone HTML output for documentation coverage reports.

Generates one self-contained HTML page with a summary and a nested
table per package, rendered from a Jinja2 template with autoescaping
so element names never leak markup.
"""

import logging
from pathlib import Path

from jinja2 import Environment

from doccov.stats.project import ProjectStats

logger = logging.getLogger(__name__)

_TEMPLATE = """\
{% macro percent(stats) -%}
{% set text = "%.2f%%"|format(stats.percent) -%}
{% if stats.documentable and stats.percent < low_coverage -%}
<span class="low">{{ text }}</span>
{%- else -%}
{{ text }}
{%- endif %}
{%- endmacro %}
{% macro row(label, stats, css_class) -%}
<tr class="{{ css_class }}"><td>{{ label }}</td>
<td>{{ stats.kind }}</td>
<td class="num">{{ stats.documentable }}</td>
<td class="num">{{ stats.documented }}</td>
<td class="num">{{ percent(stats) }}</td></tr>
{%- endmacro %}
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{{ title }}</title>
<style>
body { font-family: sans-serif; margin: 2em; }
table { border-collapse: collapse; margin-bottom: 2em; }
th, td { border: 1px solid #ccc; padding: 4px 8px; text-align: left; }
td.num { text-align: right; }
tr.type td { font-weight: bold; background: #f4f4f4; }
tr.member td:first-child { padding-left: 2em; }
.low { color: #b00; }
</style></head>
<body>
<h1>{{ title }}</h1>
<ul>
<li>Coverage: {{ percent(project) }}</li>
<li>Documented units: {{ project.documented }} of {{ project.documentable }}</li>
<li>Packages: {{ project.packages|length }} \
({{ project.documented_packages }} documented)</li>
<li>Types: {{ project.types }} ({{ project.documented_types }} documented)</li>
</ul>
{% for package in project.packages %}
<h2>Package {{ package.name }} ({{ percent(package) }})</h2>
<table><tr><th>Element</th><th>Kind</th><th>Documentable</th>\
<th>Documented</th><th>Coverage</th></tr>
{% for type_stats in package.types %}
{{ row(type_stats.name, type_stats, "type") }}
{% for group in [type_stats.fields, type_stats.enum_constants, type_stats.annotations]
   if group.documentable %}
{{ row(group.kind, group, "member") }}
{% endfor %}
{% for method in type_stats.constructors + type_stats.methods %}
{{ row(method.method.display_signature, method, "member") }}
{% endfor %}
{% endfor %}
</table>
{% endfor %}
</body>
</html>
"""

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)


class HtmlWriter:
    """Writes a coverage report as a single HTML page."""

    def __init__(self, output_dir: str = ".", low_coverage: float = 50.0) -> None:
        """Initialize the HTML writer.

        Args:
            output_dir: Directory where the report will be written.
            low_coverage: Percentages below this value are highlighted.
        """
        self.output_dir = Path(output_dir)
        self.low_coverage = low_coverage
        self._template = _env.from_string(_TEMPLATE)

    def write_report(self, project: ProjectStats, name: str = "doc-coverage") -> Path:
        """Write the coverage report to ``<output_dir>/<name>.html``.

        Args:
            project: The coverage tree.
            name: Report file name without extension.

        Returns:
            Path to the written HTML file.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        html_path = self.output_dir / f"{name}.html"
        html_path.write_text(self.render(project), encoding="utf-8")

        logger.info("Wrote HTML coverage report: %s", html_path)
        return html_path

    def render(self, project: ProjectStats) -> str:
        """Render the coverage report as an HTML document.

        Args:
            project: The coverage tree.

        Returns:
            The HTML page.
        """
        return self._template.render(
            project=project,
            title=f"Documentation Coverage {project.name}".strip(),
            low_coverage=self.low_coverage,
        )
