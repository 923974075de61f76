"""Tree copy result types."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

ALREADY_EXISTS = "already exists"


class CopyStatus(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class CopyOutcome(BaseModel):
    """Result for a single file, or for a directory that could not be mirrored."""

    kind: Literal["file", "directory"] = "file"
    source: str
    destination: str
    status: CopyStatus
    reason: str | None = None


class CopyReport(BaseModel):
    source: str
    destination: str
    directories_created: list[str] = Field(default_factory=list)
    outcomes: list[CopyOutcome] = Field(default_factory=list)

    def _count(self, status: CopyStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def created(self) -> int:
        return self._count(CopyStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self._count(CopyStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(CopyStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    def summary(self) -> dict[str, int]:
        return {
            "directories_created": len(self.directories_created),
            "created": self.created,
            "skipped": self.skipped,
            "failed": self.failed,
        }
