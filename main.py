"""Entrypoint launching the interactive menu."""

import sys

from yt_grab.cli import run_cli


def main():
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
