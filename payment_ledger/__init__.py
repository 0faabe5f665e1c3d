"""Payment ledger: applies a stream of transaction events to client accounts."""

__version__ = "0.1.0"
