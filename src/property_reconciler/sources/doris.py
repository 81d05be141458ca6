"""DORIS adapter (Department of Registration and Stamps)."""
from __future__ import annotations

from typing import Any

from ..config import SourceName
from ..models.envelope import PortalSearchParams
from .base import PortalAdapter, contains


class DorisAdapter(PortalAdapter):
    """Looks properties up by propertyId, then registrationNumber."""

    source = SourceName.DORIS

    def lookup(self, params: PortalSearchParams) -> Any:
        record = None
        if params.property_id:
            record = self.records.get(params.property_id)
        if record is None and params.registration_number:
            record = next(
                (r for r in self.records.values() if r.get("registrationNumber") == params.registration_number),
                None,
            )
        if record is None or not self._matches(record, params):
            raise self.not_found(
                propertyId=params.property_id,
                registrationNumber=params.registration_number,
                district=params.district,
                subRegistrarOffice=params.sub_registrar_office,
            )
        return record

    @staticmethod
    def _matches(record: dict, params: PortalSearchParams) -> bool:
        address = (record.get("propertyDetails") or {}).get("address")
        office = (record.get("registrationDetails") or {}).get("registrationOffice")
        return contains(address, params.district) and contains(office, params.sub_registrar_office)
