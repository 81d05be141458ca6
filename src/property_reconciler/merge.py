"""Merge engine: fold per-portal records into one canonical property record.

Sources are always folded in the fixed order DORIS, DLR, CERSAI, MCA21, so
the result does not depend on which portal answered first.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

import structlog

from .config import SOURCE_ORDER, SourceName
from .errors import PortalError
from .models.property import PropertyDetails, StandardPropertyRecord
from .transform import to_standard
from .xref import CrossReferenceResolver

logger = structlog.get_logger(__name__)

MERGED_SOURCE = "MERGED"


class FieldPrecedence(str, Enum):
    FIRST_WINS = "first_wins"
    LAST_WINS = "last_wins"
    UNION_DEDUP = "union_dedup"
    MAX = "max"


KeyFunc = Callable[[Any], Any]


def _owner_key(owner: Any) -> Any:
    return owner.identification_number


def _encumbrance_key(enc: Any) -> Any:
    return (enc.holder, enc.date_created)


def _transaction_key(tx: Any) -> Any:
    return (tx.date, tx.document_reference)


def _document_key(doc: Any) -> Any:
    return doc.number


DEFAULT_LIST_KEYS: dict[str, KeyFunc] = {
    "owner_details": _owner_key,
    "encumbrances": _encumbrance_key,
    "transaction_history": _transaction_key,
    "documents": _document_key,
}


@dataclass(frozen=True)
class MergePolicy:
    """Precedence rule per field category."""

    scalar: FieldPrecedence = FieldPrecedence.FIRST_WINS
    details: FieldPrecedence = FieldPrecedence.FIRST_WINS
    lists: FieldPrecedence = FieldPrecedence.UNION_DEDUP
    timestamp: FieldPrecedence = FieldPrecedence.MAX
    list_keys: Mapping[str, KeyFunc] = field(default_factory=lambda: dict(DEFAULT_LIST_KEYS))

    def __post_init__(self) -> None:
        for rule in (self.scalar, self.details):
            if rule not in (FieldPrecedence.FIRST_WINS, FieldPrecedence.LAST_WINS):
                raise ValueError(f"scalar/details precedence must be first_wins or last_wins, got {rule}")
        if self.lists is not FieldPrecedence.UNION_DEDUP:
            raise ValueError("lists only support union_dedup")
        if self.timestamp is not FieldPrecedence.MAX:
            raise ValueError("timestamp only supports max")


@dataclass
class MergeResult:
    record: StandardPropertyRecord | None
    sources: list[str] = field(default_factory=list)


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _dedup_key(key_func: KeyFunc, item: Any) -> Any:
    key = key_func(item)
    if key is None or (isinstance(key, tuple) and all(part is None for part in key)):
        # No identifying fields: only exact duplicates collapse
        return ("__item__", repr(item.model_dump(mode="json")))
    return key


class MergeEngine:
    """Builds the canonical record for an identifier from every portal that knows it."""

    def __init__(self, resolver: CrossReferenceResolver, policy: MergePolicy | None = None) -> None:
        self.resolver = resolver
        self.policy = policy or MergePolicy()

    @property
    def datasets(self):
        return self.resolver.datasets

    def merge(
        self,
        identifier: str,
        include: Iterable[SourceName | str] | None = None,
    ) -> StandardPropertyRecord | None:
        return self.merge_with_provenance(identifier, include=include).record

    def merge_with_provenance(
        self,
        identifier: str,
        include: Iterable[SourceName | str] | None = None,
    ) -> MergeResult:
        """Merged record plus the portals that contributed to it."""
        xref = self.resolver.resolve_all(identifier)
        enabled = set(SOURCE_ORDER) if include is None else self._enabled_sources(identifier, include)

        records: list[StandardPropertyRecord] = []
        contributors: list[str] = []
        for source in SOURCE_ORDER:
            if source not in enabled:
                continue
            try:
                record = self._standard_record(source, identifier, xref)
            except PortalError as exc:
                logger.warning(
                    "merge_source_skipped",
                    identifier=identifier,
                    source=source.label,
                    code=exc.code.value,
                    reason=exc.message,
                )
                continue
            if record is not None:
                records.append(record)
                contributors.append(source.label)

        merged = self.merge_records(records)
        if merged is None:
            logger.info("merge_empty", identifier=identifier)
            return MergeResult(record=None)
        merged.property_id = identifier
        logger.info("merge_complete", identifier=identifier, sources=contributors)
        return MergeResult(record=merged, sources=contributors)

    def merge_records(self, records: Iterable[StandardPropertyRecord]) -> StandardPropertyRecord | None:
        """Fold already-normalised records in the order given."""
        acc: StandardPropertyRecord | None = None
        for record in records:
            if acc is None:
                acc = StandardPropertyRecord(
                    owner_details=[], encumbrances=[], transaction_history=[], documents=[]
                )
            self._fold(acc, record)
        if acc is not None:
            acc.data_source = MERGED_SOURCE
        return acc

    @staticmethod
    def _enabled_sources(identifier: str, include: Iterable[SourceName | str]) -> set[SourceName]:
        """Parse ``include``; unknown names are logged and ignored."""
        enabled: set[SourceName] = set()
        for name in include:
            try:
                enabled.add(SourceName.parse(name))
            except ValueError:
                logger.warning("merge_unknown_source_ignored", identifier=identifier, source=str(name))
        return enabled

    def _standard_record(
        self,
        source: SourceName,
        identifier: str,
        xref: Mapping[SourceName, str],
    ) -> StandardPropertyRecord | None:
        if source is SourceName.MCA21:
            wanted = (identifier, xref.get(SourceName.DORIS), xref.get(SourceName.DLR))
            raw = self._company_holding(wanted, preferred=xref.get(SourceName.MCA21))
            return None if raw is None else to_standard(source, raw, property_ids=wanted)
        native_id = xref.get(source)
        if not native_id:
            return None
        raw = self.datasets.for_source(source).get(native_id)
        return None if raw is None else to_standard(source, raw)

    def _company_holding(self, wanted: tuple[str | None, ...], preferred: str | None) -> Mapping | None:
        """The mapped company's raw record, if it holds one of the wanted properties."""
        if not preferred:
            return None
        raw = self.datasets.mca21.get(preferred)
        if not isinstance(raw, Mapping):
            return None
        ids = {w for w in wanted if w}
        holdings = raw.get("propertyHoldings") or []
        if any(isinstance(h, Mapping) and h.get("propertyId") in ids for h in holdings):
            return raw
        return None

    def _fold(self, acc: StandardPropertyRecord, incoming: StandardPropertyRecord) -> None:
        policy = self.policy
        last_wins = policy.scalar is FieldPrecedence.LAST_WINS
        if incoming.registration_number is not None and (last_wins or acc.registration_number is None):
            acc.registration_number = incoming.registration_number

        for name, key_func in policy.list_keys.items():
            current = getattr(acc, name) or []
            seen = {_dedup_key(key_func, item) for item in current}
            for item in getattr(incoming, name) or []:
                key = _dedup_key(key_func, item)
                if key not in seen:
                    seen.add(key)
                    current.append(item.model_copy(deep=True))
            setattr(acc, name, current)

        if incoming.property_details is not None:
            acc.property_details = self._merge_details(acc.property_details, incoming.property_details)

        if incoming.last_updated is not None:
            if acc.last_updated is None or _aware(incoming.last_updated) > _aware(acc.last_updated):
                acc.last_updated = incoming.last_updated

    def _merge_details(self, current: PropertyDetails | None, incoming: PropertyDetails) -> PropertyDetails:
        if current is None:
            return incoming.model_copy(deep=True)
        last_wins = self.policy.details is FieldPrecedence.LAST_WINS
        updates = {}
        for name in PropertyDetails.model_fields:
            value = getattr(incoming, name)
            if value is None:
                continue
            if last_wins or getattr(current, name) is None:
                updates[name] = value
        return current.model_copy(update=updates, deep=True)
