"""CLI for void-charts."""

import argparse
import json
import sys
from pathlib import Path

from .config import load_config, settings_from_mapping
from .layout import build_chart
from .layout.chart import CHART_KINDS
from .stats import load_categories
from .visualize import generate_html, generate_json, generate_summary, generate_svg

# Top-level config keys that mirror command-line options
_OPTION_KEYS = ("input", "chart", "output")


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--input", type=Path, help="JSON file with category statistics")
    parser.add_argument(
        "--chart",
        choices=CHART_KINDS,
        help="Chart to lay out (default: saturation)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser):
    """Resolve common arguments: load config, validate, and build settings.

    Returns:
        ChartSettings built from the config file (or defaults).
    """
    config: dict = {}
    if args.config:
        config = dict(load_config(args.config))
        if not args.input and "input" in config:
            args.input = Path(config["input"])
        if not args.chart and "chart" in config:
            args.chart = config["chart"]
        if getattr(args, "output", None) is None and "output" in config:
            args.output = Path(config["output"])
        for key in _OPTION_KEYS:
            config.pop(key, None)

    if not args.input:
        parser.error("--input is required")
    if not args.chart:
        args.chart = "saturation"
    if args.chart not in CHART_KINDS:
        parser.error(f"--chart must be one of: {', '.join(CHART_KINDS)}")

    try:
        return settings_from_mapping(config)
    except ValueError as err:
        parser.error(f"Invalid config: {err}")


def load_chart(args: argparse.Namespace, parser: argparse.ArgumentParser):
    """Load categories and lay out the requested chart.

    Returns:
        Tuple of (chart, settings).
    """
    settings = resolve_common_args(args, parser)
    try:
        categories = load_categories(args.input)
    except (OSError, ValueError) as err:
        parser.error(f"Could not read {args.input}: {err}")

    if not categories:
        print(f"Warning: No category data in {args.input}", file=sys.stderr)

    chart = build_chart(args.chart, categories, settings)
    return chart, settings


def cmd_layout(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Print (or write) the chart geometry as JSON."""
    chart, _ = load_chart(args, parser)

    if args.output:
        generate_json(chart, args.output)
        print(f"Wrote {args.output}")
    else:
        json.dump(chart.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")


def cmd_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Write chart outputs (JSON, SVG, HTML, summary) to a directory."""
    chart, settings = load_chart(args, parser)
    if args.output is None:
        args.output = Path("charts")

    args.output = args.output.resolve()
    args.output.mkdir(parents=True, exist_ok=True)
    print(f"Laid out {len(chart.shapes)} categories for the {chart.kind} chart")

    generate_json(chart, args.output / f"{chart.kind}.json")
    print(f"Wrote {chart.kind}.json")

    if args.format in ("svg", "all"):
        generate_svg(chart, args.output / f"{chart.kind}.svg")
        print(f"Wrote {chart.kind}.svg")

    if args.format in ("html", "all"):
        generate_html(chart, args.output / f"{chart.kind}.html", settings.emphasis)
        print(f"Wrote {chart.kind}.html")

    generate_summary(chart, args.output / "summary.txt")
    print("Wrote summary.txt")
    print(f"\nAll outputs written to {args.output}/")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for void-charts CLI."""
    parser = argparse.ArgumentParser(
        description="Lay out radial category charts (saturation wedges, orbital TVL)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    layout_parser = subparsers.add_parser(
        "layout",
        help="Compute chart geometry and print it as JSON",
    )
    add_common_args(layout_parser)
    layout_parser.add_argument(
        "--output",
        type=Path,
        help="Write JSON to this file instead of stdout",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Render the chart to SVG/HTML files",
    )
    add_common_args(render_parser)
    render_parser.add_argument(
        "--output",
        type=Path,
        help="Output directory (default: charts)",
    )
    render_parser.add_argument(
        "--format",
        choices=("svg", "html", "all"),
        default="all",
        help="Which renderings to write (default: all)",
    )

    args = parser.parse_args(argv)

    if args.command == "layout":
        cmd_layout(args, layout_parser)
    elif args.command == "render":
        cmd_render(args, render_parser)
    else:
        # No subcommand provided - show help
        parser.print_help()


if __name__ == "__main__":
    main()
