from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, func
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tienda_motos.infra.db.models.base import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    reference: Mapped[str] = mapped_column(String(120), nullable=False)

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=0), nullable=False
    )  # whole COP
    special_adjustment: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=0), nullable=False, server_default="0"
    )

    displacement_cc: Mapped[int | None] = mapped_column(Integer, nullable=True)
    categories: Mapped[list[str]] = mapped_column(
        ARRAY(String(60)), nullable=False, server_default="{}"
    )
    # Deprecated single category, superseded by `categories`
    category: Mapped[str | None] = mapped_column(String(60), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
