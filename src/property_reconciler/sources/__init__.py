"""Portal adapters."""

from ..config import SourceName
from .base import PortalAdapter, check_formats
from .cersai import CersaiAdapter
from .dlr import DlrAdapter
from .doris import DorisAdapter
from .mca21 import Mca21Adapter

ADAPTERS: dict[SourceName, type[PortalAdapter]] = {
    SourceName.DORIS: DorisAdapter,
    SourceName.DLR: DlrAdapter,
    SourceName.CERSAI: CersaiAdapter,
    SourceName.MCA21: Mca21Adapter,
}

__all__ = [
    "ADAPTERS",
    "PortalAdapter",
    "DorisAdapter",
    "DlrAdapter",
    "CersaiAdapter",
    "Mca21Adapter",
    "check_formats",
]
