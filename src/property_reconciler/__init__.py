"""Property Reconciler - cross-source property record reconciliation.

Resolves property identifiers across the DORIS, DLR, CERSAI and MCA21
portals, fans out lookups in parallel and merges the heterogeneous
records into one canonical property record.
"""

__version__ = "0.3.0"

# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "sources":
        from property_reconciler import sources
        return sources
    if name == "models":
        from property_reconciler import models
        return models
    if name == "orchestrator":
        from property_reconciler import orchestrator
        return orchestrator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
