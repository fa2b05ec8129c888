"""The command that starts the game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from asciistorm.engine import Engine
from asciistorm.levels import DEFAULT_TITLE_PATH, TitleLevel
from asciistorm.screen import TerminalSession

DEFAULT_SETTING_PATH = "../Config/Setting.txt"


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="asciistorm", description="A terminal shoot-'em-up.")
    parser.add_argument(
        "--setting", default=DEFAULT_SETTING_PATH, help="engine setting file"
    )
    parser.add_argument("--title", default=DEFAULT_TITLE_PATH, help="title art file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game from the title screen until the player exits."""
    args = _parse_args(argv)
    if not Path(args.setting).is_file():
        print("Failed to open engine setting file.", file=sys.stderr)
        return 1

    session = TerminalSession()
    with session:
        engine = Engine(args.setting, session.show, session.read_events)
        engine.set_new_level(TitleLevel(args.title))
        engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())