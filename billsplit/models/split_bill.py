"""Split bill model"""
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from billsplit.core.exceptions import NotFoundError
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType, TransactionCategory
from billsplit.utils.decimal_utils import round_decimal, sum_decimals, to_decimal


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SplitBill(BaseModel):
    """
    A shared expense divided among participants.

    Instances are immutable and can only be constructed when the participant
    amounts add up to the total amount exactly.
    """

    id: UUID = Field(default_factory=uuid4)
    title: str = Field(..., min_length=1, max_length=500)
    total_amount: Decimal = Field(..., ge=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    paid_by_id: UUID
    split_type: SplitType
    participants: Tuple[SplitParticipant, ...] = Field(..., min_length=1)
    notes: str = ""
    category: TransactionCategory = TransactionCategory.DINING
    expense_date: date = Field(default_factory=date.today)
    created_at: datetime = Field(default_factory=_utcnow)
    group_id: Optional[UUID] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to two-place Decimal"""
        return round_decimal(to_decimal(v))

    @model_validator(mode="after")
    def check_allocation(self) -> "SplitBill":
        """Participants must be unique and their amounts must add up to the total"""
        person_ids = [p.person_id for p in self.participants]
        if len(person_ids) != len(set(person_ids)):
            raise ValueError("Participants must be unique")

        allocated = sum_decimals([p.amount for p in self.participants])
        if allocated != self.total_amount:
            raise ValueError(
                f"Sum of participant amounts ({allocated}) must equal total amount ({self.total_amount})"
            )
        return self

    @property
    def is_fully_settled(self) -> bool:
        return all(p.has_paid for p in self.participants)

    @property
    def total_settled(self) -> Decimal:
        return sum_decimals([p.amount for p in self.participants if p.has_paid])

    @property
    def total_pending(self) -> Decimal:
        return self.total_amount - self.total_settled

    @property
    def settled_count(self) -> int:
        return sum(1 for p in self.participants if p.has_paid)

    @property
    def pending_count(self) -> int:
        return len(self.participants) - self.settled_count

    @property
    def settlement_progress(self) -> Decimal:
        """Fraction of the total already settled, between 0 and 1"""
        if self.total_amount <= 0:
            return Decimal("0")
        return round_decimal(self.total_settled / self.total_amount, decimal_places=4)

    def mark_participant_paid(
        self, person_id: UUID, paid_at: Optional[datetime] = None
    ) -> "SplitBill":
        """
        Return a copy of this bill with one participant marked as paid.

        Args:
            person_id: Participant who settled their portion
            paid_at: When they paid (defaults to now)

        Returns:
            New SplitBill with updated settlement status

        Raises:
            NotFoundError: If person_id is not a participant of this bill
        """
        if person_id not in {p.person_id for p in self.participants}:
            raise NotFoundError(f"Participant {person_id} is not part of this split bill")

        paid_at = paid_at or _utcnow()
        participants = tuple(
            p.model_copy(update={"has_paid": True, "payment_date": paid_at})
            if p.person_id == person_id
            else p
            for p in self.participants
        )
        return self.model_copy(update={"participants": participants})
