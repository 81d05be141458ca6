"""Identifier cross-reference resolver.

The table is a list of equivalence classes, each naming the ids one physical
property carries in every portal that knows it. Any member of a class
resolves to every other member, so lookups are symmetric without
maintaining per-key entries.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

import structlog

from .config import SOURCE_ORDER, SourceName
from .data import PortalDatasets

if TYPE_CHECKING:
    from .merge import MergeEngine
    from .models.property import StandardPropertyRecord

logger = structlog.get_logger(__name__)

CIN_PATTERN = re.compile(r"^[UL]\d{5}[A-Z]{2}\d{4}PLC\d{6}$")

# One entry per physical property
DEFAULT_EQUIVALENCE_CLASSES: tuple[dict[SourceName, str], ...] = (
    {
        SourceName.DORIS: "MH1234567",
        SourceName.DLR: "MH1234567",
        SourceName.CERSAI: "CERSAI123456",
    },
    {
        SourceName.DORIS: "MH7654321",
        SourceName.DLR: "MH7654321",
        SourceName.MCA21: "U12345MH2010PLC123456",
    },
    {
        SourceName.DORIS: "DL8765432",
        SourceName.DLR: "DL8765432",
        SourceName.CERSAI: "CERSAI345678",
        SourceName.MCA21: "U98765DL2012PLC987654",
    },
    {
        SourceName.DLR: "KA9876543",
        SourceName.CERSAI: "CERSAI789012",
    },
    {
        SourceName.DLR: "KA1122334",
        SourceName.MCA21: "L67890KA2015PLC654321",
    },
    {
        SourceName.DLR: "TN5544332",
        SourceName.CERSAI: "CERSAI901234",
        SourceName.MCA21: "L67890KA2015PLC654321",
    },
)


def infer_source(identifier: str) -> SourceName:
    """Guess a portal from an id's shape; only used when no mapping exists."""
    if identifier.startswith("CERSAI"):
        return SourceName.CERSAI
    if CIN_PATTERN.match(identifier):
        return SourceName.MCA21
    if identifier.startswith(("MH", "DL")):
        return SourceName.DORIS
    if identifier.startswith(("KA", "TN")):
        return SourceName.DLR
    return SourceName.DORIS


class CrossReferenceResolver:
    """Maps an identifier from any portal onto its equivalents in the others."""

    def __init__(
        self,
        classes: Iterable[Mapping[SourceName | str, str]] = DEFAULT_EQUIVALENCE_CLASSES,
        datasets: PortalDatasets | None = None,
    ) -> None:
        self.datasets = datasets or PortalDatasets()
        self._classes: list[dict[SourceName, str]] = []
        self._index: dict[str, list[int]] = {}
        for members in classes:
            self.add_class(members)

    def add_class(self, members: Mapping[SourceName | str, str]) -> None:
        """Register one physical property's ids (source -> id)."""
        normalised = {SourceName.parse(src): ident for src, ident in members.items() if ident}
        if not normalised:
            return
        position = len(self._classes)
        self._classes.append(normalised)
        for ident in set(normalised.values()):
            self._index.setdefault(ident, []).append(position)

    def classes_for(self, identifier: str) -> list[dict[SourceName, str]]:
        """Every equivalence class ``identifier`` belongs to, in declaration order."""
        return [dict(self._classes[i]) for i in self._index.get(identifier, [])]

    def resolve_in_source(self, identifier: str, target: SourceName | str) -> str | None:
        target = SourceName.parse(target)
        for members in self.classes_for(identifier):
            if target in members:
                return members[target]
        return None

    def exists_in_source(self, identifier: str, target: SourceName | str) -> bool:
        """True when the mapped id for ``target`` is present in that portal's dataset."""
        target = SourceName.parse(target)
        resolved = self.resolve_in_source(identifier, target)
        return self.datasets.has(target, resolved)

    def resolve_all(self, identifier: str) -> dict[SourceName, str]:
        """Equivalent ids keyed by portal.

        Uses the first class the id belongs to; an unmapped id is returned
        under its inferred portal.
        """
        classes = self.classes_for(identifier)
        if not classes:
            return {infer_source(identifier): identifier}
        primary = classes[0]
        return {src: primary[src] for src in SOURCE_ORDER if src in primary}

    def merge_across_sources(
        self,
        identifier: str,
        include: Iterable[SourceName | str] | None = None,
        engine: MergeEngine | None = None,
    ) -> StandardPropertyRecord | None:
        """Merged canonical record for ``identifier`` (delegates to MergeEngine)."""
        if engine is None:
            from .merge import MergeEngine

            engine = MergeEngine(self)
        return engine.merge(identifier, include=include)

    def __len__(self) -> int:
        return len(self._classes)
