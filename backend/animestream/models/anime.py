import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Anime(Base):
    __tablename__ = "anime"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 10", name="ck_anime_rating_range"),
        CheckConstraint("episodes >= 0", name="ck_anime_episodes_non_negative"),
        CheckConstraint("release_year >= 1900", name="ck_anime_release_year_min"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Embed URL, rendered verbatim inside an iframe
    video_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    rating: Mapped[float] = mapped_column(
        Numeric(3, 1, asdecimal=False), nullable=False, server_default="0", index=True
    )
    genre: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    episodes: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Anime(id={self.id}, title={self.title!r})>"
