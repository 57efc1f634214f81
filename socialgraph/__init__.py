from .errors import (
    ConfigurationError,
    DuplicateEntryError,
    NotFoundError,
    SocialGraphError,
    StorageError,
)
from .models import Subscription, User

__all__ = [
    "ConfigurationError",
    "DuplicateEntryError",
    "NotFoundError",
    "SocialGraphError",
    "StorageError",
    "Subscription",
    "User",
]
