"""SQLAlchemy ORM model for admin origins."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from gamenews.infrastructure.database.base import Base


class AdminModel(Base):
    """ORM model: maps to the 'admins' table."""

    __tablename__ = "admins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    ip: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<AdminModel(id={self.id}, ip='{self.ip}')>"
