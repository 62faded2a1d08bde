"""Split request and response schemas"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from billsplit.models.split_config import SplitConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType, TransactionCategory
from billsplit.utils.decimal_utils import round_decimal, to_decimal


class SplitCalculationRequest(BaseModel):
    """Request schema for a live split preview"""

    total_amount: Decimal = Field(..., ge=0)
    configuration: SplitConfig

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to Decimal"""
        return round_decimal(to_decimal(v))


class ParticipantAllocation(BaseModel):
    """Caller-supplied participant allocation to validate"""

    person_id: UUID
    amount: Decimal
    percentage: Optional[Decimal] = None
    shares: Optional[int] = None
    adjustment: Optional[Decimal] = None

    @field_validator("amount", "percentage", "adjustment", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        if v is None:
            return v
        return to_decimal(v)

    def to_participant(self) -> SplitParticipant:
        return SplitParticipant(**self.model_dump())


class SplitValidationRequest(BaseModel):
    """Request schema for validating participant allocations"""

    total_amount: Decimal
    split_type: SplitType
    participants: List[ParticipantAllocation]

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to Decimal"""
        return to_decimal(v)


class ConfigurationResetRequest(BaseModel):
    """Request schema for reseeding a configuration after a split type change"""

    total_amount: Decimal = Field(..., ge=0)
    split_type: SplitType
    participant_ids: List[UUID] = Field(..., min_length=1)

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to Decimal"""
        return round_decimal(to_decimal(v))


class EqualAmountResponse(BaseModel):
    """Response schema for the per-person equal amount"""

    total_amount: Decimal
    participant_count: int
    amount_per_person: Decimal


class SplitBillCreate(BaseModel):
    """Schema for finalizing a split bill"""

    title: str = Field(..., max_length=500, min_length=1)
    total_amount: Decimal = Field(..., gt=0)
    paid_by_id: UUID
    expense_date: date = Field(default_factory=date.today)
    category: TransactionCategory = TransactionCategory.DINING
    notes: str = ""
    group_id: Optional[UUID] = None
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    configuration: SplitConfig

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to Decimal"""
        return round_decimal(to_decimal(v))

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Title must not be blank"""
        if not v.strip():
            raise ValueError("Please enter a title")
        return v.strip()
