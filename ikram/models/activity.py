import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from ikram.database import Base


class Activity(Base):
    """
    Aktivite logu modeli.
    Panel uzerindeki islemleri kaydeder.
    Ornek: teklif olusturma, musteri cevabi, gider silme vb.
    """

    __tablename__ = "activities"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4
    )
    # Islemin sahibi (musteri cevaplarinda teklifin sahibi yazilir)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # create, update, delete, status_change, approval_change, client_response
    action: Mapped[str] = mapped_column(
        String(50), nullable=False
    )
    # quotation, client, payment, expense, calendar_event ...
    entity_type: Mapped[str] = mapped_column(
        String(50), nullable=False
    )
    # Silinmis olabilir, nullable
    entity_id: Mapped[uuid.UUID | None] = mapped_column(
        nullable=True
    )
    description: Mapped[str] = mapped_column(
        Text, nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    owner: Mapped["User"] = relationship()
