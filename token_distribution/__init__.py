"""Token reward distribution: option validation and recipient ingestion."""

__version__ = "0.1.0"
