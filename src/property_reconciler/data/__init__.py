"""Static mock datasets for the four portals.

Records are stored in their raw camelCase wire form and are only parsed into
models when an adapter or the merge engine reads them.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..config import SourceName
from .cersai import CERSAI_DATABASE
from .dlr import DLR_DATABASE
from .doris import DORIS_DATABASE
from .mca21 import MCA21_DATABASE


@dataclass(frozen=True)
class PortalDatasets:
    """Read-only view over every portal's records, keyed by native id."""

    doris: Mapping[str, dict] = field(default_factory=lambda: DORIS_DATABASE)
    dlr: Mapping[str, dict] = field(default_factory=lambda: DLR_DATABASE)
    cersai: Mapping[str, dict] = field(default_factory=lambda: CERSAI_DATABASE)
    mca21: Mapping[str, dict] = field(default_factory=lambda: MCA21_DATABASE)

    def for_source(self, source: SourceName | str) -> Mapping[str, dict]:
        return getattr(self, SourceName.parse(source).value)

    def has(self, source: SourceName | str, record_id: str | None) -> bool:
        return bool(record_id) and record_id in self.for_source(source)


__all__ = [
    "PortalDatasets",
    "DORIS_DATABASE",
    "DLR_DATABASE",
    "CERSAI_DATABASE",
    "MCA21_DATABASE",
]
