from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base

class Subscription(Base):
    __tablename__ = "subscriptions"

    # Creation order; list queries sort on this column.
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    subscriber_id: Mapped[str] = mapped_column(ForeignKey("users.user_id", ondelete="CASCADE"))
    subscribe_to_id: Mapped[str] = mapped_column(ForeignKey("users.user_id", ondelete="CASCADE"))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("subscriber_id", "subscribe_to_id", name="uq_subscription_pair"),
        Index("idx_subscriptions_subscriber", "subscriber_id"),
        Index("idx_subscriptions_subscribe_to", "subscribe_to_id"),
        # Never reuse the id of a deleted row.
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"Subscription(subscriber_id={self.subscriber_id!r}, "
            f"subscribe_to_id={self.subscribe_to_id!r})"
        )
