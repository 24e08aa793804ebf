"""Ship ORM: the persisted row behind core.ship.Ship.

Invariants:
    - id is an autoincrement integer primary key, assigned on first flush
    - Column bounds mirror core.domain_types (name/planet 50 chars)
    - rating is stored, always written together with speed, is_used and prod_date

Design Decisions:
    - ship_type stored as a non-native enum (VARCHAR): portable across SQLite and PostgreSQL
    - Indexes on the sortable columns (speed, prod_date, rating)
"""

from datetime import date

from sqlalchemy import Boolean, Date, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ship_catalog.core.domain_types import MAX_TEXT_LENGTH, ShipType
from ship_catalog.db.base import Base


class ShipRecord(Base):
    """Row in the ship table."""
    __tablename__ = "ship"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_TEXT_LENGTH), nullable=False)
    planet: Mapped[str] = mapped_column(String(MAX_TEXT_LENGTH), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(
        Enum(ShipType, native_enum=False, length=16), nullable=False,
    )
    prod_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    is_used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, index=True)
