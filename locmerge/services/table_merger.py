"""Table merger — folds semicolon-delimited translation tables into the shared store."""

import logging
import os
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from locmerge.config import settings
from locmerge.diagnostics import NULL_SINK, DiagnosticSink
from locmerge.ledger import MergeLedger, normalize_source_path
from locmerge.store import LocalizationStore

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
COMMENT_PREFIXES = ("#", "//")

MergedCallback = Callable[[str, str, int], None]


@dataclass
class TableRow:
    key: str
    values: dict[str, str] = field(default_factory=dict)
    line_number: int = 0


def _is_skipped(line: str) -> bool:
    return not line.strip() or line.startswith(COMMENT_PREFIXES)


def parse_table_lines(lines: list[str]) -> tuple[list[str], list[TableRow]]:
    """Split a table into its header languages and data rows.

    ``header_languages[i]`` is the trimmed language name of column ``i + 1``.
    Rows keep only non-empty cells under a named column; when a language
    appears twice in the header the right-most non-empty cell wins.
    """
    if not lines:
        return [], []

    header_languages = [name.strip() for name in lines[0].split(FIELD_SEPARATOR)[1:]]
    rows: list[TableRow] = []

    for number, line in enumerate(lines[1:], start=2):
        if _is_skipped(line):
            continue

        cells = line.split(FIELD_SEPARATOR)
        key = cells[0].strip()
        if not key:
            continue

        row = TableRow(key=key, line_number=number)
        for language, value in zip(header_languages, cells[1:]):
            if language and value:
                row.values[language] = value
        rows.append(row)

    return header_languages, rows


class TableMerger:
    """Merges table sources into one store.

    Each merger owns a fresh MergeLedger unless one is passed in; hosts that
    build several mergers must share one ledger to merge a path only once.

    ``on_merged(path, label, touched_keys)`` is called after every successful
    table merge.
    """

    def __init__(
        self,
        store: LocalizationStore,
        ledger: MergeLedger | None = None,
        sink: DiagnosticSink | None = None,
        log_prefix: str = "",
        on_merged: MergedCallback | None = None,
    ):
        self._store = store
        self._ledger = ledger if ledger is not None else MergeLedger()
        self._sink = sink or NULL_SINK
        self._prefix = log_prefix or settings.log_prefix
        self._on_merged = on_merged

    @property
    def ledger(self) -> MergeLedger:
        return self._ledger

    def merge_table(self, source_path: str | os.PathLike, label: str | None = None) -> int:
        """Merge one table file into the store and return the number of touched keys.

        A path (compared case-insensitively in absolute form) is merged at most
        once per ledger; repeats return 0. The claim is taken before reading,
        so an unreadable file still uses up its slot.
        """
        try:
            full_path = normalize_source_path(source_path)
            display_path = os.fspath(source_path)
        except TypeError as exc:
            self._sink.error(f"{self._prefix} Invalid table path {source_path!r}: {exc!r}")
            return 0

        if not self._ledger.try_claim(full_path):
            logger.debug("Table %s already merged, skipping", full_path)
            return 0

        try:
            lines = self._read_lines(display_path)
        except Exception as exc:
            self._sink.error(f"{self._prefix} Failed to read {display_path}: {exc!r}")
            return 0

        if len(lines) <= 1:
            self._sink.warn(f"{self._prefix} {label or display_path} has no rows.")
            return 0

        try:
            _, rows = parse_table_lines(lines)
            touched = self._apply_rows(rows)
        except Exception as exc:
            logger.exception("Merging %s failed (non-fatal)", display_path)
            self._sink.error(f"{self._prefix} Failed to merge {display_path}: {exc!r}")
            return 0

        name = label or os.path.basename(display_path)
        self._sink.info(f"{self._prefix} Injected/updated {touched} keys from {name}.")
        self._notify_merged(full_path, name, touched)
        return touched

    def merge_tables_under(self, root: str | os.PathLike | None, relative_path: str) -> int:
        """Merge ``<subdir>/<relative_path>`` for every immediate subdirectory of *root*."""
        try:
            root_str = os.fspath(root) if root is not None else ""
        except TypeError:
            root_str = str(root)
        if not root_str.strip() or not os.path.isdir(root_str):
            self._sink.error(f"{self._prefix} pluginsRoot does not exist: {root_str}")
            return 0

        try:
            plugin_dirs = sorted(
                (entry for entry in Path(root_str).iterdir() if entry.is_dir()),
                key=lambda entry: entry.name,
            )
        except OSError as exc:
            self._sink.error(f"{self._prefix} Failed to list {root_str}: {exc!r}")
            return 0

        total = 0
        files = 0
        for plugin_dir in plugin_dirs:
            table = os.path.join(plugin_dir, relative_path)
            if os.path.isfile(table):
                files += 1
                total += self.merge_table(table, label=plugin_dir.name)

        if total > 0:
            self._sink.info(
                f"{self._prefix} Merged translations for {total} key(s) "
                f"from {files} file(s) at '{relative_path}'."
            )
        return total

    def merge_translations(
        self,
        translations: Mapping[str, Mapping[str, str]],
        label: str = "translations",
    ) -> int:
        """Merge an in-memory ``{language: {key: value}}`` mapping.

        Same cell rules as a table: unknown languages are ignored and empty
        values never clear an existing translation. Returns the number of
        distinct keys touched.
        """
        try:
            rows = self._rows_from_mapping(translations)
            touched = self._apply_rows(rows)
        except Exception as exc:
            logger.exception("Registering %s failed (non-fatal)", label)
            self._sink.error(f"{self._prefix} Failed to register {label}: {exc!r}")
            return 0

        self._sink.info(f"{self._prefix} Injected/updated {touched} keys from {label}.")
        return touched

    def _read_lines(self, path: str) -> list[str]:
        with open(path, encoding=settings.table_encoding) as f:
            return [line.rstrip("\n") for line in f]

    @staticmethod
    def _rows_from_mapping(translations: Mapping[str, Mapping[str, str]]) -> list[TableRow]:
        rows: dict[str, TableRow] = {}
        for language, entries in translations.items():
            for raw_key, value in entries.items():
                key = raw_key.strip()
                if not key:
                    continue
                row = rows.setdefault(key, TableRow(key=key))
                if value:
                    row.values[language] = value
        return list(rows.values())

    def _apply_rows(self, rows: Iterable[TableRow]) -> int:
        touched = 0
        with self._store.lock:
            languages = self._store.known_languages
            dictionary = self._store.dictionary
            for row in rows:
                slots = dictionary.get(row.key)
                if slots is None or len(slots) != len(languages):
                    slots = self._store.empty_slots()
                    dictionary[row.key] = slots

                for language, value in row.values.items():
                    index = self._store.language_index(language)
                    if 0 <= index < len(slots) and value:
                        slots[index] = value

                touched += 1
        return touched

    def _notify_merged(self, path: str, label: str, touched: int) -> None:
        if self._on_merged is None:
            return
        try:
            self._on_merged(path, label, touched)
        except Exception as exc:
            logger.exception("on_merged callback failed for %s (non-fatal)", path)
            self._sink.error(f"{self._prefix} on_merged callback failed for {label}: {exc!r}")
