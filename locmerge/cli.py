"""
Command line for merging plugin translation tables and looking up keys.

Usage:
    python -m locmerge --root ./plugins --relative MCM/languages.csv --lookup mymod_description
    python -m locmerge --table extra.csv --language Deutsch --lookup greet --fallback Hello
"""

import argparse
import logging

from locmerge.config import settings
from locmerge.diagnostics import DiagnosticSink
from locmerge.services.resolver import LookupResolver
from locmerge.services.table_merger import TableMerger
from locmerge.store import LocalizationStore

logger = logging.getLogger("locmerge")


# ---------------------------------------------------------------------------
# CLI arguments
# ---------------------------------------------------------------------------

def _language_list(value):
    return [name.strip() for name in value.split(",") if name.strip()]


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="locmerge",
        description="Merge semicolon-delimited translation tables and resolve keys",
    )

    p.add_argument("--languages", type=_language_list, default=list(settings.languages),
                   help="Comma-separated, ordered list of known languages")
    p.add_argument("--language", default=None,
                   help="Active language for lookups (default: first known language)")
    p.add_argument("--log-level", default=settings.log_level,
                   help="Logging level for merge diagnostics")

    source = p.add_mutually_exclusive_group()
    source.add_argument("--root", default=settings.plugins_root or None,
                        help="Plugins directory; every subdirectory is scanned")
    source.add_argument("--table", action="append", default=[],
                        help="Merge a single table file (repeatable)")
    p.add_argument("--relative", default=settings.relative_table_path,
                   help="Table path relative to each plugin directory")

    p.add_argument("--lookup", action="append", default=[],
                   help="Key to resolve after merging (repeatable)")
    p.add_argument("--fallback", default="",
                   help="Text printed for keys without a translation")

    args = p.parse_args(argv)
    if not args.table and not args.root:
        p.error("one of --root or --table is required")
    return args


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def _configure_logging(level_name):
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def main(argv=None):
    args = parse_args(argv)
    _configure_logging(args.log_level)

    store = LocalizationStore(args.languages, language=args.language)
    merger = TableMerger(store, sink=DiagnosticSink.from_logger(logger))

    if args.table:
        total = sum(merger.merge_table(path) for path in args.table)
    else:
        total = merger.merge_tables_under(args.root, args.relative)

    print(f"Touched keys: {total}")

    resolver = LookupResolver(store)
    for key in args.lookup:
        print(f"{key}={resolver.resolve(key, args.fallback)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
