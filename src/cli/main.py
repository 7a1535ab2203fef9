"""CLI entry point: print (or write) the Jest configuration for a project as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.jest.manifest import ManifestError

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the Jest configuration for a project.")
    parser.add_argument(
        "--app-dir",
        type=Path,
        help="Project directory containing package.json (overrides APP_DIRECTORY).",
    )
    parser.add_argument(
        "--ejecting",
        action="store_true",
        help="Emit <rootDir>-relative paths suitable for an ejected project.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON configuration to this file instead of stdout.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    Unsupported overrides exit with status 1 from inside the builder.
    """

    args = _parse_args(argv)
    load_dotenv(".env")

    try:
        overrides = {"APP_DIRECTORY": args.app_dir} if args.app_dir else {}
        settings = load_settings(**overrides)
    except RuntimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    app = create_app(settings)

    try:
        config = app.build_config(ejecting=args.ejecting)
    except (FileNotFoundError, ManifestError) as exc:
        logger.debug("config build failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    rendered = json.dumps(config, indent=2) + "\n"
    if args.output:
        args.output.write_text(rendered, encoding="utf-8")
        logger.info("jest config written path=%s", args.output)
    else:
        sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
