"""Split participant model"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from billsplit.utils.decimal_utils import round_decimal, to_decimal


class SplitParticipant(BaseModel):
    """A participant's allocated portion of a split bill"""

    person_id: UUID
    amount: Decimal
    percentage: Optional[Decimal] = None
    shares: Optional[int] = None
    adjustment: Optional[Decimal] = None
    has_paid: bool = False
    payment_date: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", "adjustment", mode="before")
    @classmethod
    def convert_money(cls, v):
        """Convert money values to two-place Decimal"""
        if v is None:
            return v
        return round_decimal(to_decimal(v))

    @field_validator("percentage", mode="before")
    @classmethod
    def convert_percentage(cls, v):
        """Convert percentage to Decimal"""
        if v is None:
            return v
        return to_decimal(v)
