"""
どこで: `api.cli`（コンソールスクリプト `lumina-palette`）。
何を: 保存済みセッションに対してテーマ切替・パラメータ更新・リセット・表示・エクスポートを行う。
なぜ: GUI なしでパレット調整とエクスポートを再現可能な手順として実行できるようにするため。

Usage:
    lumina-palette show
    lumina-palette theme dawn
    lumina-palette set accentHue 90
    lumina-palette adjust yellow 40
    lumina-palette export scheme > lumina.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from common.logging import setup_default_logging
from engine.params.state import ParamField
from engine.params.store import ParameterStore
from palette.color_types import COLOR_SECTIONS, AccentSlot
from palette.ui_helpers import ExportFormat, export_palette, export_params
from util.utils import config_section

from .session import open_session

logger = logging.getLogger(__name__)

EXIT_ERROR = 2
_EXPORT_CHOICES = [f.value for f in ExportFormat] + ["params"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lumina-palette", description="Generate and tune Lumina Base24 palettes."
    )
    parser.add_argument("--state-file", default=None, help="session JSON (default: data/session/lumina.json)")
    parser.add_argument("--no-persist", action="store_true", help="do not write changes back")
    parser.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("show", help="print active theme, parameters and colors")
    p.add_argument("--json", action="store_true", help="machine-readable output")

    sub.add_parser("themes", help="list themes and flavors")

    p = sub.add_parser("theme", help="switch theme")
    p.add_argument("theme_id")

    p = sub.add_parser("flavor", help="switch flavor")
    p.add_argument("flavor_id")

    p = sub.add_parser("set", help="update one parameter")
    p.add_argument("field", help=", ".join(f.value for f in ParamField))
    p.add_argument("value", type=float)

    p = sub.add_parser("adjust", help="set a per-slot hue offset")
    p.add_argument("slot", help=", ".join(s.value for s in AccentSlot))
    p.add_argument("offset", type=float)

    p = sub.add_parser("clear-adjust", help="remove a per-slot hue offset")
    p.add_argument("slot")

    sub.add_parser("reset-flavor", help="clear the active flavor layer")
    sub.add_parser("reset-theme", help="clear every layer of the active theme")

    p = sub.add_parser("export", help="export colors or parameters as JSON")
    p.add_argument("format", choices=_EXPORT_CHOICES)
    p.add_argument("--name", default=None, help="scheme name (default: theme name)")
    p.add_argument("--author", default=None)
    return parser


def _print_json(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _show(store: ParameterStore, as_json: bool) -> None:
    params = store.current_params()
    colors = store.current_colors()
    if as_json:
        _print_json(
            {
                "theme": store.active_theme,
                "flavor": store.active_flavor,
                "customized": store.is_customized(),
                "params": params.to_dict(),
                "colors": colors.as_dict(),
            }
        )
        return
    theme = store.theme_info()
    status = "customized" if store.is_customized() else "default"
    print(f"{theme.name} ({store.active_theme}/{store.active_flavor}, {status})")
    for key, value in params.to_dict().items():
        if key != "colorAdjustments":
            print(f"  {key:<13} {value:g}")
    for slot, offset in params.color_adjustments.items():
        print(f"  adjust {slot.value:<6} {offset:+g}")
    for section in COLOR_SECTIONS:
        print(section.title)
        for info in section.colors:
            print(f"  {info.key}  {colors[info.key]}  {info.name}")


def _themes(store: ParameterStore) -> None:
    for theme_id in store.theme_ids():
        theme = store.catalog.get_theme(theme_id)
        marker = "*" if theme_id == store.active_theme else " "
        flavors = ", ".join(store.catalog.flavor_ids(theme_id))
        print(f"{marker} {theme_id:<10} {theme.name}: {theme.tagline} [{flavors}]")


def _export(store: ParameterStore, fmt: str, name: str | None, author: str | None) -> None:
    if fmt == "params":
        _print_json(export_params(store.current_params(), store.active_theme, store.active_flavor))
        return
    scheme_name = name or f"{store.theme_info().name} {store.active_flavor.title()}"
    _print_json(export_palette(store.current_colors(), fmt, name=scheme_name, author=author))


def run(args: argparse.Namespace) -> int:
    store = open_session(path=args.state_file, persist=False if args.no_persist else None)
    cmd = args.command
    if cmd == "show":
        _show(store, args.json)
    elif cmd == "themes":
        _themes(store)
    elif cmd == "theme":
        store.switch_theme(args.theme_id)
    elif cmd == "flavor":
        store.switch_flavor(args.flavor_id)
    elif cmd == "set":
        store.update_param(ParamField.from_name(args.field), args.value)
    elif cmd == "adjust":
        store.update_color_adjustment(AccentSlot.from_name(args.slot), args.offset)
    elif cmd == "clear-adjust":
        store.reset_color_adjustment(AccentSlot.from_name(args.slot))
    elif cmd == "reset-flavor":
        store.reset_flavor()
    elif cmd == "reset-theme":
        store.reset_theme()
    elif cmd == "export":
        _export(store, args.format, args.name, args.author)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level, config_level=config_section("logging").get("level"))
    try:
        return run(args)
    except (KeyError, ValueError) as e:
        # KeyError は CatalogLookupError と未知スロット/フィールドを含む
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"lumina-palette: error: {message}", file=sys.stderr)
        logger.debug("command failed", exc_info=True)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
