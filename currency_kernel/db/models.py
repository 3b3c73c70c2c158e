"""
Module: currency_kernel.db.models
Responsibility: ORM persistence for cached Currency objects backing
    SqlCurrencyCache.  Each row is one cache key and the serialized currency
    stored under it.
Architecture position: Kernel > DB.  May import from db/base.py only.

Invariants enforced:
    - cache_key is the primary key; one row per key (set() upserts).
    - payload holds exactly the text produced by Currency.serialize().
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from currency_kernel.db.base import Base


class CachedCurrency(Base):
    """One cache entry: key -> serialized Currency."""

    __tablename__ = "currency_cache"

    cache_key: Mapped[str] = mapped_column(String(64), primary_key=True)

    payload: Mapped[str] = mapped_column(nullable=False)

    stored_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<CachedCurrency {self.cache_key}>"
