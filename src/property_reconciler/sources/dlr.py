"""DLR adapter (Digital Land Records)."""
from __future__ import annotations

from typing import Any

import structlog

from ..config import SourceName
from ..errors import ErrorCode, PortalError
from ..models.envelope import PortalSearchParams
from .base import PortalAdapter, contains

logger = structlog.get_logger(__name__)


class DlrAdapter(PortalAdapter):
    """Looks properties up by propertyId, registrationNumber, then ownerName.

    A propertyId from another portal's namespace is translated through the
    cross-reference resolver first.
    """

    source = SourceName.DLR

    def prepare(self, params: PortalSearchParams) -> PortalSearchParams:
        pid = params.property_id
        if not pid or pid in self.records:
            return params
        translated = self.resolver.resolve_in_source(pid, SourceName.DLR)
        if translated and translated in self.records:
            logger.info("dlr_id_translated", property_id=pid, dlr_property_id=translated)
            return params.model_copy(update={"property_id": translated})

        elsewhere = {
            "existsInDoris": self.resolver.exists_in_source(pid, SourceName.DORIS),
            "existsInCersai": self.resolver.exists_in_source(pid, SourceName.CERSAI),
            "existsInMca21": self.resolver.exists_in_source(pid, SourceName.MCA21),
        }
        if any(elsewhere.values()):
            raise PortalError(
                ErrorCode.NOT_FOUND,
                "The property exists in other databases but not in DLR",
                details={"propertyId": pid, **elsewhere},
                source=self.name,
            )
        return params

    def lookup(self, params: PortalSearchParams) -> Any:
        candidates: list[dict] = []
        if params.property_id and params.property_id in self.records:
            candidates = [self.records[params.property_id]]
        elif params.registration_number:
            candidates = [
                r for r in self.records.values() if r.get("registrationNumber") == params.registration_number
            ][:1]
        if not candidates and params.owner_name:
            candidates = [
                r
                for r in self.records.values()
                if any(contains(o.get("name"), params.owner_name) for o in r.get("ownerDetails") or [])
            ]

        matches = [r for r in candidates if self._matches(r, params)]
        if not matches:
            raise self.not_found(
                propertyId=params.property_id,
                registrationNumber=params.registration_number,
                ownerName=params.owner_name,
                surveyNumber=params.survey_number,
                district=params.district,
                village=params.village,
            )
        return self.one_or_many(matches)

    @staticmethod
    def _matches(record: dict, params: PortalSearchParams) -> bool:
        land = record.get("landRecordDetails") or {}
        if params.survey_number and land.get("khasraNumber") != params.survey_number:
            return False
        return contains(land.get("revenueDistrict"), params.district) and contains(
            land.get("village"), params.village
        )
