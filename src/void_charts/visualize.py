"""Generate chart outputs."""

import json
from pathlib import Path

from .layout import Chart, render_html, render_svg
from .layout.color import clamp_score, score_label
from .layout.interaction import format_compact_currency


def generate_json(chart: Chart, output_file: Path) -> None:
    """Write chart geometry, labels and legend as JSON.

    Args:
        chart: The laid-out chart.
        output_file: Path to write the JSON file.
    """
    with open(output_file, "w") as f:
        json.dump(chart.to_dict(), f, indent=2)


def generate_svg(chart: Chart, output_file: Path) -> None:
    """Write a static SVG rendering of the chart.

    Args:
        chart: The laid-out chart.
        output_file: Path to write the SVG file.
    """
    with open(output_file, "w") as f:
        f.write(render_svg(chart))


def generate_html(chart: Chart, output_file: Path, style=None) -> None:
    """Write an interactive pyvis rendering of the chart.

    Args:
        chart: The laid-out chart.
        output_file: Path to write the HTML file.
        style: Optional EmphasisStyle for hover emphasis.
    """
    render_html(chart, output_file, style)


def generate_summary(chart: Chart, output_file: Path) -> None:
    """Generate human-readable summary file.

    Args:
        chart: The laid-out chart.
        output_file: Path to write the summary file.
    """
    categories = list(chart.categories.values())

    with open(output_file, "w") as f:
        f.write("=" * 60 + "\n")
        f.write(f"Void Charts Summary ({chart.kind})\n")
        f.write("=" * 60 + "\n\n")

        f.write(f"Categories: {len(categories)}\n")
        f.write(f"Priority categories: {sum(1 for c in categories if c.is_priority)}\n")
        total_tvl = sum(c.metric_a for c in categories)
        f.write(f"Total TVL: {format_compact_currency(total_tvl)}\n\n")

        if not categories:
            f.write("No category data.\n")
            return

        f.write("Categories by gap score:\n")
        f.write("-" * 40 + "\n")
        for c in sorted(categories, key=lambda c: -clamp_score(c.score)):
            score = clamp_score(c.score)
            marker = "*" if c.is_priority else " "
            f.write(f" {marker}{score:5.0f}  {score_label(score):<10}  {c.name}\n")

        f.write("\nCategories by TVL:\n")
        f.write("-" * 40 + "\n")
        for c in sorted(categories, key=lambda c: -c.metric_a)[:10]:
            f.write(f"  {format_compact_currency(c.metric_a):>9}  {c.name}\n")
