"""
Module: currency_kernel.db.base
Responsibility: Declarative base for the kernel's SQLAlchemy ORM models.
Architecture position: Kernel > DB.  Lowest-level import target within
    db/.  MUST NOT import from domain/ or cache/.

Invariants enforced:
    - int maps to Integer and str to Text unless a column says otherwise,
      so every backend (PostgreSQL, SQLite) accepts the schema unchanged.
"""

from typing import ClassVar

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for all currency kernel models.

    Contract:
        Every ORM model inherits from Base, so Base.metadata holds the full
        schema for create_tables().
    """

    type_annotation_map: ClassVar[dict] = {
        int: Integer,
        str: Text,
    }
