"""Customer Domain Entity

Invoice recipient. Referenced by invoices through customer_id.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, id_column


class Customer(BaseModel, table=True):
    """
    Customer - Billed party on an invoice

    Domain Rules:
    - name is required
    - Deleting invoices never affects customers
    """

    __tablename__ = "customers"

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique customer identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer display name"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(500), nullable=True),
        description="Street address"
    )

    city: Optional[str] = Field(
        default=None,
        sa_column=Column(String(120), nullable=True),
        description="City"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Customer creation timestamp"
    )
