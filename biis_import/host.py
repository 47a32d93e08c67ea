"""Host-side worker configuration types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO


@dataclass
class WorkerConfiguration:
    """Generic worker configuration; import workers need the subclass."""


@dataclass
class ImportWorkerConfiguration(WorkerConfiguration):
    streams: dict[str, IO | None] = field(default_factory=dict)
