"""Command line interface for the tombstoning settings store."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .lifecycle import GameLifecycle
from .paths import app_home
from .resume import compose_game_view, parse_query
from .settings import JsonFileBackingStore, SettingFormatError, SettingsManager
from .settings.codec import SUPPORTED_TYPES, parse_value, type_from_name
from .state import GameContext

log = logging.getLogger(__name__)

TYPE_CHOICES = [t.__name__ for t in SUPPORTED_TYPES]


def _open_settings(home: Optional[str]) -> SettingsManager:
    return SettingsManager(JsonFileBackingStore(home=app_home(home)))


def _cmd_get(settings: SettingsManager, args: argparse.Namespace) -> int:
    target = type_from_name(args.type)
    if args.default is None:
        raw = settings.get_raw(args.name)
        if raw is None:
            print(f"{args.name}: not set", file=sys.stderr)
            return 1
        # Validate against the requested type even without a default.
        print(parse_value(args.name.lower(), raw, target))
        return 0
    default = parse_value("--default", args.default, target)
    print(settings.get_value(args.name, default))
    return 0


def _cmd_set(settings: SettingsManager, args: argparse.Namespace) -> int:
    value = parse_value(args.name.lower(), args.value, type_from_name(args.type))
    settings.set_value(args.name, value)
    return 0


def _cmd_delete(settings: SettingsManager, args: argparse.Namespace) -> int:
    settings.delete_value(args.name)
    return 0


def _cmd_clear(settings: SettingsManager, _args: argparse.Namespace) -> int:
    settings.clear_values()
    return 0


def _cmd_list(settings: SettingsManager, _args: argparse.Namespace) -> int:
    names = settings.names()
    if not names:
        print("No settings stored.")
        return 0
    width = max(len(n) for n in names)
    for name in names:
        print(f"{name:<{width}}  {settings.get_raw(name)}")
    return 0


def _cmd_game_view(settings: SettingsManager, args: argparse.Namespace) -> int:
    context = GameContext(settings)
    state = GameLifecycle(context).on_activated(process_preserved=False)
    view = compose_game_view(parse_query(args.query or ""), state)
    print(view.message)
    print(view.score_text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tombstoning", description="Inspect and edit persisted game settings.")
    ap.add_argument("--home", type=str, default=None, help="Settings folder (default: $TOMBSTONING_HOME or ~/.tombstoning)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("get", help="Print a setting value")
    p.add_argument("name")
    p.add_argument("--type", default="str", choices=TYPE_CHOICES)
    p.add_argument("--default", default=None, help="Value printed when the setting is absent")
    p.set_defaults(func=_cmd_get)

    p = sub.add_parser("set", help="Add or overwrite a setting")
    p.add_argument("name")
    p.add_argument("value")
    p.add_argument("--type", default="str", choices=TYPE_CHOICES, help="Validate and normalize VALUE as this type")
    p.set_defaults(func=_cmd_set)

    p = sub.add_parser("delete", help="Remove a setting (no-op if absent)")
    p.add_argument("name")
    p.set_defaults(func=_cmd_delete)

    p = sub.add_parser("clear", help="Remove every setting")
    p.set_defaults(func=_cmd_clear)

    p = sub.add_parser("list", help="List stored settings")
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser("game-view", help="Render the game page text from the persisted game state")
    p.add_argument("--query", default="", help='Navigation parameters, e.g. "GameState=Resume"')
    p.set_defaults(func=_cmd_game_view)

    p = sub.add_parser("gui", help="Start the Tk front end")
    p.set_defaults(func=None)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    if args.command == "gui":
        from .gui import main as gui_main

        gui_main(home=args.home)
        return 0

    settings = _open_settings(args.home)
    try:
        return int(args.func(settings, args))
    except SettingFormatError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
