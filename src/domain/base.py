"""Shared base for persisted domain entities."""

from sqlalchemy import BigInteger, Column, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns.
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class BaseModel(SQLModel):
    """Base class for all table-backed entities"""


def id_column() -> Column:
    """Auto-increment primary key column"""
    return Column(ID_TYPE, primary_key=True, autoincrement=True)
