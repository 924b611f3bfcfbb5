"""ApiToken and ApiTokenPermission ORM models."""

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class ApiToken(CuidMixin, TimestampMixin, Base):
    """API token. Table: api_token. Unique name; access_key holds the HMAC-SHA512 hex digest."""

    __tablename__ = "api_token"

    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    access_key: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)

    permissions: Mapped[list["ApiTokenPermission"]] = relationship(
        back_populates="token",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="ApiTokenPermission.action",
    )


class ApiTokenPermission(CuidMixin, TimestampMixin, Base):
    """Permission granted to a custom API token. Table: api_token_permission. Unique (token_id, action)."""

    __tablename__ = "api_token_permission"

    action: Mapped[str] = mapped_column(String, nullable=False)
    token_id: Mapped[str] = mapped_column(
        String, ForeignKey("api_token.id", ondelete="CASCADE"), nullable=False
    )

    token: Mapped[ApiToken] = relationship(back_populates="permissions")

    __table_args__ = (
        UniqueConstraint("token_id", "action", name="uq_api_token_permission_action"),
        Index("ix_api_token_permission_token", "token_id"),
    )
