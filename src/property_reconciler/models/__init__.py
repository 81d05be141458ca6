"""Pydantic data models."""

from .envelope import (
    PortalSearchParams,
    SourceData,
    SourceMetadata,
    SourceResponse,
    UnifiedError,
    UnifiedMetadata,
    UnifiedResponse,
    UnifiedSearchParams,
    generate_request_id,
)
from .portal import (
    CersaiPropertyRecord,
    DlrPropertyRecord,
    DorisPropertyRecord,
    Mca21CompanyRecord,
    PortalRecord,
    PropertyHolding,
)
from .property import (
    Document,
    Encumbrance,
    PropertyDetails,
    PropertyOwner,
    StandardPropertyRecord,
    Transaction,
)

__all__ = [
    "StandardPropertyRecord",
    "PropertyOwner",
    "PropertyDetails",
    "Encumbrance",
    "Transaction",
    "Document",
    "DorisPropertyRecord",
    "DlrPropertyRecord",
    "CersaiPropertyRecord",
    "Mca21CompanyRecord",
    "PropertyHolding",
    "PortalRecord",
    "PortalSearchParams",
    "UnifiedSearchParams",
    "SourceResponse",
    "SourceMetadata",
    "SourceData",
    "UnifiedResponse",
    "UnifiedError",
    "UnifiedMetadata",
    "generate_request_id",
]
