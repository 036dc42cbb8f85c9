"""
Command entry point.
Usage: frauth init
"""
import sys
from typing import List, Optional

from frauth import init
from frauth.errors import FrauthError
from frauth.paths import Paths
from frauth.prompts import ConsolePrompter

COMMANDS = ('init',)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the frauth command; returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or args[0] not in COMMANDS:
        print("Usage: frauth init", file=sys.stderr)
        return 2

    prompter = ConsolePrompter()
    try:
        init.run(Paths.from_env(), prompter)
    except (FrauthError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
