class SocialGraphError(Exception):
    """Base class for errors raised by the subscription store."""

    default_message = "Social graph error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(SocialGraphError):
    """A referenced user does not exist (self-subscription included)."""

    default_message = "User not found"


class DuplicateEntryError(SocialGraphError):
    default_message = "Duplicate Subscription"


class StorageError(SocialGraphError):
    """The database failed for a reason other than a uniqueness violation."""

    default_message = "Storage failure"


class ConfigurationError(SocialGraphError):
    default_message = "DATABASE_URL is not set"
