import pytest

from locmerge.diagnostics import DiagnosticSink
from locmerge.ledger import MergeLedger
from locmerge.services.resolver import LookupResolver
from locmerge.services.table_merger import TableMerger
from locmerge.store import LocalizationStore

LANGUAGES = ["English", "Français", "Deutsch"]


class RecordingSink:
    """Collects messages per channel for assertions."""

    def __init__(self):
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def as_sink(self) -> DiagnosticSink:
        return DiagnosticSink(
            info=self.infos.append,
            warn=self.warnings.append,
            error=self.errors.append,
        )


@pytest.fixture
def store():
    return LocalizationStore(LANGUAGES)


@pytest.fixture
def ledger():
    return MergeLedger()


@pytest.fixture
def recorder():
    return RecordingSink()


@pytest.fixture
def merger(store, ledger, recorder):
    return TableMerger(store, ledger=ledger, sink=recorder.as_sink())


@pytest.fixture
def resolver(store):
    return LookupResolver(store, default_language="English")


@pytest.fixture
def write_table(tmp_path):
    """Write a table file under tmp_path and return its path."""

    def _write(name: str, *lines: str, encoding: str = "utf-8"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write
