"""Invoice Sequence Domain Entity

Atomic counter behind invoice-number allocation.
"""

from sqlmodel import Field, Column
from sqlalchemy import BigInteger, String
from src.domain.base import BaseModel


class InvoiceSequence(BaseModel, table=True):
    """
    Invoice Sequence - Last sequence value handed out

    Domain Rules:
    - One row per named sequence
    - last_value only grows; it is incremented under a row lock in the
      same transaction that inserts the invoice
    """

    __tablename__ = "invoice_sequences"

    name: str = Field(
        sa_column=Column(String(50), primary_key=True),
        description="Sequence name"
    )

    last_value: int = Field(
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Last allocated sequence number"
    )
