import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from ..base import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_user_id)
    username: Mapped[str] = mapped_column(String(255))
    alias: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    platform_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    platform_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, username={self.username!r})"
