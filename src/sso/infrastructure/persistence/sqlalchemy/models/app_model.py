"""SQLAlchemy model for client apps and their signing keys."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sso.infrastructure.persistence.sqlalchemy.models.base import Base


class AppModel(Base):
    """SQLAlchemy model for persisting apps.

    The id is chosen by whoever provisions the app, not generated.

    Table: apps
    """

    __tablename__ = "apps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # PEM text
    private_key: Mapped[str] = mapped_column(Text, nullable=False)
    public_key: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<AppModel(id={self.id}, name={self.name})>"
