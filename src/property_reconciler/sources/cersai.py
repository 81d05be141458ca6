"""CERSAI adapter (security-interest registry)."""
from __future__ import annotations

from typing import Any

from ..config import SourceName
from ..models.envelope import PortalSearchParams
from .base import PortalAdapter, contains


class CersaiAdapter(PortalAdapter):
    """Looks assets up by assetId, then propertyId, then borrowerName."""

    source = SourceName.CERSAI

    def lookup(self, params: PortalSearchParams) -> Any:
        candidates: list[dict] = []
        if params.asset_id and params.asset_id in self.records:
            candidates = [self.records[params.asset_id]]
        if not candidates and params.property_id:
            candidates = [r for r in self.records.values() if r.get("propertyId") == params.property_id]
        if not candidates and params.borrower_name:
            candidates = [
                r
                for r in self.records.values()
                if any(contains(b.get("name"), params.borrower_name) for b in r.get("borrowerDetails") or [])
            ]

        matches = [r for r in candidates if self._matches(r, params)]
        if not matches:
            raise self.not_found(
                assetId=params.asset_id,
                propertyId=params.property_id,
                borrowerName=params.borrower_name,
                lenderName=params.lender_name,
                securityType=params.security_type,
            )
        return self.one_or_many(matches)

    @staticmethod
    def _matches(record: dict, params: PortalSearchParams) -> bool:
        if params.lender_name and not contains((record.get("lenderDetails") or {}).get("name"), params.lender_name):
            return False
        if params.security_type:
            interests = record.get("securityInterests") or []
            return any(contains(si.get("type"), params.security_type) for si in interests)
        return True
