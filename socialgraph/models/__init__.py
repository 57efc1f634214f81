from .user_model import User
from .subscription_model import Subscription

__all__ = ["User", "Subscription"]
