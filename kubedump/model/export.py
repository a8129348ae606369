"""Export-related models."""

import threading
from enum import Enum
from pathlib import Path
from typing import FrozenSet

from pydantic import BaseModel, Field, PrivateAttr, field_validator


class ExportFormat(str, Enum):
    """Supported export formats."""

    YAML = "yaml"
    JSON = "json"


def parse_filter_list(value: str) -> FrozenSet[str]:
    """Parse a comma separated filter flag such as "configmaps,Secrets".

    Entries are lowercased and trimmed, empty entries are dropped, so an empty
    string yields an empty set meaning "no restriction".
    """
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.lower().split(",") if part.strip())


class DumpOptions(BaseModel):
    """Parameters of a single dump run."""

    output_dir: Path = Path("dump")
    resources: FrozenSet[str] = frozenset()
    ignore_resources: FrozenSet[str] = frozenset()
    namespaces: FrozenSet[str] = frozenset()
    ignore_namespaces: FrozenSet[str] = frozenset()
    clusterscoped: bool = True
    namespaced: bool = True
    stateless: bool = True
    threads: int = Field(default=10, ge=1)
    export_format: ExportFormat = ExportFormat.YAML

    @field_validator(
        "resources", "ignore_resources", "namespaces", "ignore_namespaces", mode="before"
    )
    @classmethod
    def _split_lists(cls, value):
        if isinstance(value, str):
            return parse_filter_list(value)
        return frozenset(str(v).strip().lower() for v in value if str(v).strip())


class DumpResult(BaseModel):
    """Written-file counter and run duration.

    Workers call increment() concurrently; reading written while the run is in
    flight only gives an approximate value.
    """

    written: int = 0
    elapsed: float = 0.0

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def increment(self) -> int:
        with self._lock:
            self.written += 1
            return self.written
