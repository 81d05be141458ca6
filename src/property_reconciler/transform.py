"""Normalise raw portal records into StandardPropertyRecord."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from .config import SourceName
from .errors import ErrorCode, PortalError
from .models.portal import (
    CersaiPropertyRecord,
    DlrPropertyRecord,
    DorisPropertyRecord,
    Mca21CompanyRecord,
    PropertyHolding,
)
from .models.property import (
    ContactInformation,
    Encumbrance,
    PropertyDetails,
    PropertyOwner,
    StandardPropertyRecord,
)

_STANDARD_FIELDS = tuple(StandardPropertyRecord.model_fields)


def _standard_from(record: StandardPropertyRecord, source: SourceName, **overrides: Any) -> StandardPropertyRecord:
    values = {name: getattr(record, name) for name in _STANDARD_FIELDS}
    values.update(overrides)
    values["data_source"] = source.label
    return StandardPropertyRecord(**values)


def normalise_doris(raw: Mapping[str, Any]) -> StandardPropertyRecord:
    record = DorisPropertyRecord.model_validate(raw)
    return _standard_from(record, SourceName.DORIS)


def normalise_dlr(raw: Mapping[str, Any]) -> StandardPropertyRecord:
    """Khasra number becomes the standard survey number."""
    record = DlrPropertyRecord.model_validate(raw)
    details = record.property_details or PropertyDetails()
    land = record.land_record_details
    if land is not None and land.khasra_number and not details.survey_number:
        details = details.model_copy(update={"survey_number": land.khasra_number})
    return _standard_from(record, SourceName.DLR, property_details=details)


def normalise_cersai(raw: Mapping[str, Any]) -> StandardPropertyRecord:
    """Borrowers are the owners; security interests are the encumbrances."""
    record = CersaiPropertyRecord.model_validate(raw)
    owners = record.borrower_details or record.owner_details
    encumbrances = record.encumbrances
    if record.security_interests:
        encumbrances = [
            Encumbrance(
                type=si.type,
                holder=si.holder,
                amount=si.amount,
                date_created=si.date_created,
                date_expiry=si.date_expiry,
                status=si.status,
                details=si.details,
            )
            for si in record.security_interests
        ]
    return _standard_from(record, SourceName.CERSAI, owner_details=owners, encumbrances=encumbrances)


def holding_to_standard(company: Mca21CompanyRecord, holding: PropertyHolding) -> StandardPropertyRecord:
    """Project one company holding onto the standard shape, owned by the company."""
    owner = PropertyOwner(
        name=company.company_name,
        identification_number=company.cin_number,
        identification_type="CIN",
        ownership_type="CORPORATE",
        contact_information=ContactInformation(address=company.registered_address),
    )
    return StandardPropertyRecord(
        property_id=holding.property_id,
        registration_number=holding.registration_number,
        owner_details=[owner],
        property_details=PropertyDetails(address=holding.address, area=holding.area, type=holding.type),
        encumbrances=list(holding.encumbrances),
        last_updated=company.last_updated,
        data_source=SourceName.MCA21.label,
    )


def normalise_mca21(raw: Mapping[str, Any], *property_ids: str | None) -> StandardPropertyRecord | None:
    """Standard record for the first holding matching any of ``property_ids``."""
    company = Mca21CompanyRecord.model_validate(raw)
    holding = company.holding_for(*property_ids)
    if holding is None:
        return None
    return holding_to_standard(company, holding)


def normalise_mca21_holdings(raw: Mapping[str, Any]) -> list[StandardPropertyRecord]:
    company = Mca21CompanyRecord.model_validate(raw)
    return [holding_to_standard(company, h) for h in company.property_holdings]


_NORMALISERS: dict[SourceName, Callable[..., StandardPropertyRecord | None]] = {
    SourceName.DORIS: normalise_doris,
    SourceName.DLR: normalise_dlr,
    SourceName.CERSAI: normalise_cersai,
    SourceName.MCA21: normalise_mca21,
}


def to_standard(
    source: SourceName | str,
    raw: Mapping[str, Any],
    property_ids: tuple[str | None, ...] = (),
) -> StandardPropertyRecord | None:
    """Normalise ``raw`` from ``source``.

    ``property_ids`` selects the holding for MCA21 company records and is
    ignored for the other portals. Raises TRANSFORMATION_ERROR when the raw
    record does not fit the portal's schema.
    """
    key = SourceName.parse(source)
    try:
        if key is SourceName.MCA21:
            return normalise_mca21(raw, *property_ids)
        return _NORMALISERS[key](raw)
    except (ValidationError, TypeError, AttributeError) as exc:
        raise PortalError(
            ErrorCode.TRANSFORMATION_ERROR,
            f"Failed to transform {key.label} data",
            details={"originalData": dict(raw) if isinstance(raw, Mapping) else raw, "reason": str(exc)},
            source=key.label,
        ) from exc
