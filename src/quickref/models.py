"""Core quickref data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class DocumentReference(BaseModel):
    """One document advertised by the remote listing."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    # The contents API reports directories with a null download_url.
    download_url: Optional[str] = None


@dataclass(slots=True)
class SyncStats:
    downloaded: int = 0
    failed: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.downloaded + self.failed

    def record_success(self) -> None:
        self.downloaded += 1

    def record_failure(self, name: str, error: str) -> None:
        self.failed += 1
        self.failures.append((name, error))


@dataclass(slots=True)
class ResolveStats:
    matches: int = 0
    missing: List[str] = field(default_factory=list)

    @property
    def found_any(self) -> bool:
        return self.matches > 0
