#!/usr/bin/env python3
"""
sdkdedup CLI — replace duplicate assemblies in a directory tree with links.
Exit code 0 when every file was hashed and linked, 1 otherwise.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("DEBUG") else logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from sdkdedup.core.errors import DirectoryNotFoundError
from sdkdedup.core.models import DeduplicationParams, DeduplicationStats, LinkMode, ReplaceStrategy, DEFAULT_EXTENSIONS
from sdkdedup.commands import DeduplicationCommand
from sdkdedup.aliases import (
    USAGE_TEXT, EPILOG_TEXT, HARD_LINKS_HELP_TEXT, VERIFY_HELP_TEXT, DELETE_FIRST_HELP_TEXT
)


def split_extensions(value: str) -> List[str]:
    """Splits one -x value such as ".dll,.exe" into extensions."""
    return [ext.strip() for ext in value.split(",") if ext.strip()]


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False

        # Undecodable file names (surrogate escapes, cp1252 pipes) must not abort a run mid-way
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding="utf-8", errors="backslashreplace")

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        # -h selects hard links, so argparse's own help flag is replaced by --help/-?
        parser = argparse.ArgumentParser(
            prog="sdkdedup",
            description="SDK Deduplicator - Deduplicate assemblies in an SDK installation",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT,
            add_help=False
        )

        parser.add_argument(
            "directory",
            nargs="?",
            type=str,
            help="Path to SDK installation directory to deduplicate"
        )
        parser.add_argument(
            "--hard-links", "-h",
            action="store_true",
            dest="hard_links",
            help=HARD_LINKS_HELP_TEXT
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output"
        )
        parser.add_argument(
            "--extensions", "-x",
            action="extend",
            type=split_extensions,
            metavar="EXT[,EXT...]",
            help="File extensions to deduplicate, comma separated or repeated. Default: .dll,.exe"
        )
        parser.add_argument(
            "--verify",
            action="store_true",
            help=VERIFY_HELP_TEXT
        )
        parser.add_argument(
            "--delete-first",
            action="store_true",
            dest="delete_first",
            help=DELETE_FIRST_HELP_TEXT
        )
        parser.add_argument(
            "--help", "-?",
            action="store_true",
            dest="show_help",
            help="Show this help message"
        )
        return parser

    @classmethod
    def parse_args(cls, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parsed = cls.build_parser().parse_args(args)
        if not parsed.extensions:
            parsed.extensions = list(DEFAULT_EXTENSIONS)
        return parsed

    @staticmethod
    def print_usage(stream=None) -> None:
        print(USAGE_TEXT, file=stream or sys.stdout)

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams(
                root_dir=args.directory,
                link_mode=LinkMode.HARD if args.hard_links else LinkMode.SYMBOLIC,
                verbose=args.verbose,
                extensions=args.extensions,
                verify=args.verify,
                strategy=ReplaceStrategy.DELETE_FIRST if args.delete_first else ReplaceStrategy.ATOMIC
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_deduplication(self, params: DeduplicationParams) -> DeduplicationStats:
        """Execute deduplication workflow."""
        try:
            return DeduplicationCommand().execute(params)
        except DirectoryNotFoundError as e:
            self.error_exit(str(e))

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit code."""
        args = self.parse_args(argv)

        if args.show_help:
            self.print_usage()
            return 0

        if not args.directory:
            self.print_usage()
            return 1

        self.verbose = args.verbose
        params = self.create_params(args)
        stats = self.run_deduplication(params)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"Completed in {elapsed:.2f} seconds")

        return 0 if stats.success else 1


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
