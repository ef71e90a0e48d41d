"""Merge plugin translation tables into a shared localization store."""

from locmerge.diagnostics import NULL_SINK, DiagnosticSink
from locmerge.ledger import MergeLedger, normalize_source_path
from locmerge.services.resolver import LookupResolver
from locmerge.services.table_merger import TableMerger, TableRow, parse_table_lines
from locmerge.store import LocalizationStore

__version__ = "0.1.0"

__all__ = [
    "DiagnosticSink",
    "LocalizationStore",
    "LookupResolver",
    "MergeLedger",
    "NULL_SINK",
    "TableMerger",
    "TableRow",
    "normalize_source_path",
    "parse_table_lines",
]
