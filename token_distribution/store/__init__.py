"""Activity store backed by MongoDB."""

from .store import ACCOUNTS_COLLECTION, VOLUMES_COLLECTION, ActivityStore, MongoConfig

__all__ = [
    "ActivityStore",
    "MongoConfig",
    "ACCOUNTS_COLLECTION",
    "VOLUMES_COLLECTION",
]
