"""Run counters and per-file result types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


class CheckStatus(str, Enum):
    COMPLIANT = "compliant"
    NEEDS_WRITE = "needs_write"
    FAILED = "failed"


class FileOutcome(str, Enum):
    SKIPPED = "skipped"
    FORMATTED = "formatted"
    ERROR = "error"


@dataclass(slots=True)
class RunStats:
    scanned: int = 0
    formatted: int = 0
    skipped: int = 0
    errors: int = 0

    def record(self, outcome: FileOutcome) -> None:
        if outcome is FileOutcome.SKIPPED:
            self.skipped += 1
        elif outcome is FileOutcome.FORMATTED:
            self.formatted += 1
        else:
            self.errors += 1

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
