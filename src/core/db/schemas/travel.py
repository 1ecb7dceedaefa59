"""SQLAlchemy ORM model for the travels table."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class TravelRow(Base):
    __tablename__ = "travels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"))
    # Points are stored as "<lat>, <lng>" text, see Point.to_storage
    from_: Mapped[str] = mapped_column("from", String(50), nullable=False)
    to: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(15), nullable=False, server_default="pending")

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'in_process', 'ready')", name="chk_travels_status"),
        CheckConstraint("status = 'pending' OR user_id IS NOT NULL", name="chk_travels_assigned"),
        Index("idx_travels_user_id", "user_id"),
    )
