"""Command-line entry point: build once, or build and keep watching."""

import argparse
import logging
import sys
from pathlib import Path

from .builder import UserscriptBuilder
from .errors import BuildError, BundleError
from .watch import WatchLoop

logger = logging.getLogger("userscript_build")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="userscript-build",
        description="Bundle a project into a single .user.js userscript.",
    )
    parser.add_argument("-w", "--watch", action="store_true", help="rebuild whenever the source directory changes")
    parser.add_argument("--project", type=Path, default=Path.cwd(), help="project directory (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        builder = UserscriptBuilder(args.project)
        logger.info(f"Building userscript{' (watch mode)' if args.watch else ''}...")
        builder.build()
        if args.watch:
            WatchLoop(builder).run()
    except BundleError as e:
        logger.error(f"{e}:")
        for line in e.diagnostics:
            logger.error(line)
        return 1
    except BuildError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1
    return 0
