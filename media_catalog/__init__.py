"""Video media catalog: aggregate, use cases and storage adapters."""

__version__ = "0.1.0"
