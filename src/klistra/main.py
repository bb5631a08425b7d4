"""CLI entry point: render a markdown file and publish it.

Usage:
    klistra notes/post.md                 # upload, print public URL
    klistra notes/post.md --file-output   # write notes/post.html instead
    klistra notes/post.md -c ~/b2.toml    # explicit config file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from klistra import __version__
from klistra.common.config import load_config
from klistra.common.errors import KlistraError
from klistra.common.logging import setup_logging
from klistra.publisher import PublishPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="klistra",
        description="A simple markdown-to-HTML converter and uploader for Backblaze B2.",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="The markdown file to convert",
    )
    parser.add_argument(
        "-f",
        "--file-output",
        "--fo",
        dest="file_output",
        action="store_true",
        default=False,
        help="Write the HTML next to the input file (extension .html) instead of uploading",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to the config file (default: $HOME/.config/klistra/config.toml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or debug detail (-vv)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run the pipeline and return the exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(level=_log_level(args.verbose), module_name="klistra")

    try:
        # Validated up front in both modes, before anything is written
        storage_config = load_config(args.config_path).s3

        pipeline = PublishPipeline(config=storage_config)
        outcome = pipeline.run(args.file, local_output=args.file_output)
    except KlistraError as e:
        logger.debug("Invocation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(outcome.message)
    return 0


def main() -> None:
    load_dotenv()
    sys.exit(run())


if __name__ == "__main__":
    main()
