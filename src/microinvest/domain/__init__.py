"""Domain layer for microinvest application.

The analytics engine (snapshot, insight, metrics, growth, series) is pure and
has no storage dependency. Services that read the ledger from a database are
resolved lazily so that the database layer can import domain entities without
an import cycle.
"""

_SERVICES = {
    "LedgerService": "microinvest.domain.ledger",
    "PortfolioService": "microinvest.domain.portfolio",
    "LedgerCSVService": "microinvest.domain.csv_import",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
