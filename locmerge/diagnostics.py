"""Diagnostic sink — info / warning / error channels for merge reporting."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

Channel = Callable[[str], None]


def _noop(_message: str) -> None:
    return None


@dataclass(frozen=True)
class DiagnosticSink:
    """Three independent message channels; any of them may be left unset."""

    info: Channel = field(default=_noop)
    warn: Channel = field(default=_noop)
    error: Channel = field(default=_noop)

    def __post_init__(self):
        # Explicit None means "not wired", same as omitting the channel.
        for name in ("info", "warn", "error"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, _noop)

    @classmethod
    def from_logger(cls, logger: logging.Logger) -> "DiagnosticSink":
        return cls(info=logger.info, warn=logger.warning, error=logger.error)


NULL_SINK = DiagnosticSink()
