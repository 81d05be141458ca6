"""Standard property record and its building blocks."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PortalModel(BaseModel):
    """Base for every portal-facing model.

    Attributes are snake_case in Python; keys are camelCase on the wire.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContactInformation(PortalModel):
    address: str | None = None
    phone: str | None = None
    email: str | None = None


class PropertyOwner(PortalModel):
    name: str
    identification_number: str | None = None
    identification_type: str | None = Field(default=None, description="PAN, AADHAAR, PASSPORT, CIN, ...")
    ownership_percentage: float | None = None
    ownership_type: str | None = Field(default=None, description="SOLE, JOINT, CORPORATE, TRUST")
    contact_information: ContactInformation | None = None


class Coordinates(PortalModel):
    latitude: float | None = None
    longitude: float | None = None


class Boundaries(PortalModel):
    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None


class PropertyDetails(PortalModel):
    address: str | None = None
    area: str | None = None
    area_unit: str | None = None
    type: str | None = None
    sub_type: str | None = None
    description: str | None = None
    coordinates: Coordinates | None = None
    boundaries: Boundaries | None = None
    survey_number: str | None = None
    land_mark: str | None = None


class Encumbrance(PortalModel):
    type: str
    holder: str
    amount: float | None = None
    date_created: str
    date_expiry: str | None = None
    status: str
    details: str | None = None
    document_reference: str | None = None
    registration_number: str | None = None


class TransactionParty(PortalModel):
    role: str
    name: str
    identification_number: str | None = None


class Transaction(PortalModel):
    date: str
    type: str
    parties: list[TransactionParty] = Field(default_factory=list)
    amount: float | None = None
    document_reference: str | None = None
    registration_number: str | None = None
    registration_date: str | None = None
    registration_office: str | None = None


class Document(PortalModel):
    type: str
    number: str
    issued_date: str
    issued_by: str
    expiry_date: str | None = None
    url: str | None = None
    status: str | None = None


class StandardPropertyRecord(PortalModel):
    """Canonical property shape every portal record is normalised to."""

    property_id: str | None = None
    registration_number: str | None = None
    owner_details: list[PropertyOwner] | None = None
    property_details: PropertyDetails | None = None
    encumbrances: list[Encumbrance] | None = None
    transaction_history: list[Transaction] | None = None
    documents: list[Document] | None = None
    last_updated: datetime | None = None
    data_source: str | None = None
