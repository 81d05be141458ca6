"""Portal-specific record shapes.

Each is a superset of StandardPropertyRecord (MCA21 aside, which is a company
record that lists the properties it holds).
"""
from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .property import (
    ContactInformation,
    Encumbrance,
    PortalModel,
    PropertyOwner,
    StandardPropertyRecord,
)


class RegistrationDetails(PortalModel):
    registration_date: str
    registration_office: str
    registration_fee: float
    stamp_duty: float


class DorisPropertyRecord(StandardPropertyRecord):
    """Department of Registration and Stamps record."""

    doris_specific_field: str | None = None
    registration_details: RegistrationDetails | None = None


class LandRecordDetails(PortalModel):
    khasra_number: str | None = None
    khata_number: str | None = None
    land_use: str | None = None
    land_classification: str | None = None
    revenue_district: str | None = None
    tehsil: str | None = None
    village: str | None = None


class DlrPropertyRecord(StandardPropertyRecord):
    """Digital Land Records entry."""

    dlr_specific_field: str | None = None
    land_record_details: LandRecordDetails | None = None


class SecurityInterest(PortalModel):
    type: str
    holder: str
    amount: float | None = None
    date_created: str
    date_expiry: str | None = None
    status: str
    details: str | None = None
    loan_account_number: str | None = None
    interest_rate: float | None = None
    loan_tenure: int | None = Field(default=None, description="Months")
    monthly_installment: float | None = None


class LenderDetails(PortalModel):
    name: str
    branch: str | None = None
    ifsc_code: str | None = None
    contact_information: ContactInformation | None = None


class CersaiPropertyRecord(StandardPropertyRecord):
    """CERSAI security-interest registration for an asset."""

    cersai_specific_field: str | None = None
    asset_id: str | None = None
    security_interests: list[SecurityInterest] | None = None
    borrower_details: list[PropertyOwner] | None = None
    lender_details: LenderDetails | None = None


class Director(PortalModel):
    name: str
    din: str
    designation: str
    appointment_date: str


class PropertyHolding(PortalModel):
    property_id: str
    registration_number: str
    address: str
    type: str
    area: str
    acquisition_date: str
    acquisition_value: float
    encumbrances: list[Encumbrance] = Field(default_factory=list)


class FinancialInformation(PortalModel):
    last_filed_year: str
    turnover: float
    net_worth: float
    profit_after_tax: float


class Mca21CompanyRecord(PortalModel):
    """Ministry of Corporate Affairs company master data."""

    cin_number: str
    company_name: str
    registered_address: str | None = None
    date_of_incorporation: str | None = None
    authorized_capital: float | None = None
    paid_up_capital: float | None = None
    company_status: str | None = None
    directors: list[Director] = Field(default_factory=list)
    property_holdings: list[PropertyHolding] = Field(default_factory=list)
    financial_information: FinancialInformation | None = None
    last_updated: datetime | None = None
    mca21_specific_field: str | None = None

    def holding_for(self, *property_ids: str | None) -> PropertyHolding | None:
        """First holding whose propertyId equals any of the given ids."""
        wanted = {pid for pid in property_ids if pid}
        for holding in self.property_holdings:
            if holding.property_id in wanted:
                return holding
        return None


PortalRecord = DorisPropertyRecord | DlrPropertyRecord | CersaiPropertyRecord | Mca21CompanyRecord
