"""Education back-office service: fee catalog, fee ledger, reporting and invoices."""

__version__ = "1.0.0"
