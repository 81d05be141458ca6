"""MCA21 adapter (Ministry of Corporate Affairs company registry)."""
from __future__ import annotations

from typing import Any

from ..config import SourceName
from ..models.envelope import PortalSearchParams
from .base import PortalAdapter, contains


class Mca21Adapter(PortalAdapter):
    """Looks companies up by CIN, then by a property they hold, then by name."""

    source = SourceName.MCA21

    def lookup(self, params: PortalSearchParams) -> Any:
        candidates: list[dict] = []
        if params.cin_number and params.cin_number in self.records:
            candidates = [self.records[params.cin_number]]
        if not candidates and params.property_id:
            candidates = [
                r
                for r in self.records.values()
                if any(h.get("propertyId") == params.property_id for h in r.get("propertyHoldings") or [])
            ]
        if not candidates and params.company_name:
            candidates = [r for r in self.records.values() if contains(r.get("companyName"), params.company_name)]

        matches = [r for r in candidates if self._matches(r, params)]
        if not matches:
            raise self.not_found(
                cinNumber=params.cin_number,
                companyName=params.company_name,
                propertyId=params.property_id,
                directorName=params.director_name,
                registeredOffice=params.registered_office,
            )
        return self.one_or_many(matches)

    @staticmethod
    def _matches(record: dict, params: PortalSearchParams) -> bool:
        if params.director_name and not any(
            contains(d.get("name"), params.director_name) for d in record.get("directors") or []
        ):
            return False
        return contains(record.get("registeredAddress"), params.registered_office)
