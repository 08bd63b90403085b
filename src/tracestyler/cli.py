from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .core.bundles import Encoding, LegendType
from .core.columns import ColumnSpec
from .core.palettes import lookup_palette, palette_names
from .core.scheme import ColorScheme
from .core.sources import SchemeHandle, resolve_columns
from .core.state import InteractionContext
from .core.tables import (
    area_chart_style,
    bar_chart_style,
    legend_style,
    line_chart_style,
    scatter_chart_style,
)
from .errors import StylingError
from .logging_config import setup_logging

_TABLES = {
    Encoding.LINE: line_chart_style,
    Encoding.AREA: area_chart_style,
    Encoding.BAR: bar_chart_style,
    Encoding.SCATTER: scatter_chart_style,
}


def _parse_column(raw: str) -> ColumnSpec:
    key, _, color = raw.partition(":")
    return ColumnSpec(key=key, color=color or None)


def _jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return _jsonable(value.to_dict())
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    return value


def cmd_palettes(args: argparse.Namespace) -> None:
    if args.show:
        palette = lookup_palette(args.show)
        print(json.dumps({"name": palette.name, "colors": list(palette.colors)}, indent=2))
        return
    for name in palette_names():
        print(f"{name}\t{len(lookup_palette(name))}")


def cmd_resolve(args: argparse.Namespace) -> None:
    scheme = ColorScheme([_parse_column(c) for c in args.columns], args.palette)
    encoding = Encoding(args.chart)

    if args.states:
        if encoding is Encoding.LEGEND:
            payload = {key: legend_style(scheme, key, args.legend_type) for key in scheme.keys}
        elif encoding is Encoding.AXIS:
            raise ValueError("axis styles do not vary by state")
        else:
            payload = _TABLES[encoding](scheme)
    else:
        context = InteractionContext(selected_key=args.selected, highlighted_key=args.highlighted)
        payload = resolve_columns(
            SchemeHandle(scheme),
            scheme.keys,
            context,
            encoding=encoding,
            legend_type=args.legend_type,
        )
    print(json.dumps(_jsonable(payload), indent=2))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("tracestyler")
    parser.add_argument("--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--log-dir", type=Path, help="write rotating log files to this directory")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("palettes", help="list registered palettes")
    sp.add_argument("--show", metavar="NAME", help="print the colors of one palette")
    sp.set_defaults(func=cmd_palettes)

    sp = sub.add_parser("resolve", help="print resolved style bundles")
    sp.add_argument("columns", nargs="+", help="column keys, optionally key:color")
    sp.add_argument("--chart", choices=[e.value for e in Encoding], default=Encoding.LINE.value)
    sp.add_argument("--palette", help="palette name (default: the configured default palette)")
    sp.add_argument("--selected")
    sp.add_argument("--highlighted")
    sp.add_argument(
        "--legend-type",
        choices=[t.value for t in LegendType],
        default=LegendType.SWATCH.value,
    )
    sp.add_argument("--states", action="store_true", help="print all four states per column")
    sp.set_defaults(func=cmd_resolve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose or args.log_dir:
        setup_logging(
            console_level=logging.DEBUG if args.verbose else logging.WARNING,
            log_dir=args.log_dir,
        )
    try:
        args.func(args)
    except (StylingError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
