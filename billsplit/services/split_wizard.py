"""
Multi-step split bill input flow.

The flow collects bill details, the payer, participants, a split type and
its per-participant configuration, then a final review. Every step is an
immutable SplitBillDraft; each transform returns a new draft, so switching
split type resets the configuration instead of mutating it in place.
"""
import enum
import logging
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from billsplit.core.exceptions import ValidationError
from billsplit.models.split_bill import SplitBill
from billsplit.models.split_config import (AdjustmentsConfig, EqualSplitConfig,
                                          ExactAmountsConfig,
                                          PercentagesConfig, SharesConfig,
                                          SplitConfig)
from billsplit.models.split_preview import SplitPreview
from billsplit.models.split_type import SplitType, TransactionCategory
from billsplit.models.validation_result import ValidationResult
from billsplit.schemas.split import SplitBillCreate
from billsplit.services.split_bill_service import SplitBillService
from billsplit.services.split_calculation_service import SplitCalculationService
from billsplit.services.split_strategies import equal_allocation
from billsplit.utils.decimal_utils import (HUNDRED_PERCENT, from_cents,
                                          round_decimal, to_decimal)

logger = logging.getLogger(__name__)


class WizardStep(enum.IntEnum):
    """Steps of the split bill flow, in order"""
    DETAILS = 0
    PAYER = 1
    PARTICIPANTS = 2
    SPLIT_TYPE = 3
    CONFIGURE = 4
    REVIEW = 5

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title()


class SplitConfiguration(BaseModel):
    """Per-participant values entered for the selected split type"""

    split_type: SplitType = SplitType.EQUAL
    participant_ids: List[UUID] = Field(default_factory=list)
    amounts: Dict[UUID, Decimal] = Field(default_factory=dict)
    adjustments: Dict[UUID, Decimal] = Field(default_factory=dict)
    percentages: Dict[UUID, Decimal] = Field(default_factory=dict)
    shares: Dict[UUID, int] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("amounts", "adjustments", mode="before")
    @classmethod
    def convert_money(cls, v):
        """Convert money values to two-place Decimal"""
        if not isinstance(v, dict):
            return v
        return {k: round_decimal(to_decimal(a)) for k, a in v.items()}

    @field_validator("percentages", mode="before")
    @classmethod
    def convert_percentages(cls, v):
        """Convert percentages to Decimal"""
        if not isinstance(v, dict):
            return v
        return {k: to_decimal(p) for k, p in v.items()}

    def _for_participants(self, values: dict) -> dict:
        return {pid: values[pid] for pid in self.participant_ids if pid in values}

    def to_strategy_config(self) -> SplitConfig:
        """Build the strategy configuration for the selected split type."""
        if self.split_type == SplitType.EXACT_AMOUNTS:
            return ExactAmountsConfig(amounts=self._for_participants(self.amounts))
        if self.split_type == SplitType.PERCENTAGES:
            return PercentagesConfig(percentages=self._for_participants(self.percentages))
        if self.split_type == SplitType.SHARES:
            return SharesConfig(shares=self._for_participants(self.shares))
        if self.split_type == SplitType.ADJUSTMENTS:
            return AdjustmentsConfig(
                participant_ids=self.participant_ids,
                adjustments=self._for_participants(self.adjustments),
            )
        return EqualSplitConfig(participant_ids=self.participant_ids)

    def with_amount(self, person_id: UUID, amount) -> "SplitConfiguration":
        return self.model_copy(
            update={"amounts": {**self.amounts, person_id: round_decimal(to_decimal(amount))}}
        )

    def with_adjustment(self, person_id: UUID, adjustment) -> "SplitConfiguration":
        return self.model_copy(
            update={"adjustments": {**self.adjustments, person_id: round_decimal(to_decimal(adjustment))}}
        )

    def with_percentage(self, person_id: UUID, percentage) -> "SplitConfiguration":
        return self.model_copy(
            update={"percentages": {**self.percentages, person_id: to_decimal(percentage)}}
        )

    def with_shares(self, person_id: UUID, shares: int) -> "SplitConfiguration":
        return self.model_copy(update={"shares": {**self.shares, person_id: int(shares)}})


def reset_configuration(
    participant_ids: List[UUID], split_type: SplitType, total_amount
) -> SplitConfiguration:
    """
    Build a fresh configuration for split_type with default values.

    Exact amounts start from the equal split, adjustments from zero,
    percentages from an equal share of 100% and shares from 1 each. The
    defaults always form a valid split.

    Args:
        participant_ids: Participants of the bill, in display order
        split_type: Newly selected split type
        total_amount: Total bill amount

    Returns:
        New SplitConfiguration; nothing from a previous configuration is kept
    """
    participant_ids = list(participant_ids)
    configuration = SplitConfiguration(split_type=split_type, participant_ids=participant_ids)
    if not participant_ids:
        return configuration

    if split_type == SplitType.EXACT_AMOUNTS:
        equal_split = SplitCalculationService.calculate_equal_split(total_amount, participant_ids)
        return configuration.model_copy(
            update={"amounts": {p.person_id: p.amount for p in equal_split}}
        )

    if split_type == SplitType.ADJUSTMENTS:
        return configuration.model_copy(
            update={"adjustments": {pid: Decimal("0.00") for pid in participant_ids}}
        )

    if split_type == SplitType.PERCENTAGES:
        allocation = equal_allocation(HUNDRED_PERCENT, len(participant_ids))
        return configuration.model_copy(
            update={
                "percentages": {
                    pid: from_cents(cents) for pid, cents in zip(participant_ids, allocation)
                }
            }
        )

    if split_type == SplitType.SHARES:
        return configuration.model_copy(update={"shares": {pid: 1 for pid in participant_ids}})

    return configuration


class SplitBillDraft(BaseModel):
    """Everything entered so far in the split bill flow"""

    current_step: WizardStep = WizardStep.DETAILS

    # Details
    title: str = ""
    total_amount: Optional[Decimal] = None
    expense_date: date = Field(default_factory=date.today)
    category: TransactionCategory = TransactionCategory.DINING
    notes: str = ""

    # Payer and participants
    paid_by_id: Optional[UUID] = None
    participant_ids: List[UUID] = Field(default_factory=list)
    group_id: Optional[UUID] = None

    # Split type and its configuration
    split_type: SplitType = SplitType.EQUAL
    configuration: SplitConfiguration = Field(default_factory=SplitConfiguration)

    model_config = ConfigDict(frozen=True)

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_amount(cls, v):
        """Convert total_amount to two-place Decimal"""
        if v is None:
            return v
        return round_decimal(to_decimal(v))


def update_draft(draft: SplitBillDraft, **changes) -> SplitBillDraft:
    """Return a validated copy of draft with changes applied."""
    data = draft.model_dump()
    data.update(changes)
    return SplitBillDraft.model_validate(data)


def preview(draft: SplitBillDraft) -> SplitPreview:
    """Recompute participant amounts and validation for the current configuration."""
    return SplitCalculationService.preview(
        draft.total_amount or Decimal("0.00"),
        draft.configuration.to_strategy_config(),
    )


def step_validation(draft: SplitBillDraft, step: Optional[WizardStep] = None) -> ValidationResult:
    """
    Check whether the flow may proceed past a step.

    Args:
        draft: Current draft
        step: Step to check (defaults to the draft's current step)

    Returns:
        ValidationResult with the message to show when the step is incomplete
    """
    step = draft.current_step if step is None else step

    if step == WizardStep.DETAILS:
        if not draft.title.strip():
            return ValidationResult.invalid("Please enter a title")
        if draft.total_amount is None or draft.total_amount <= 0:
            return ValidationResult.invalid("Please enter a valid amount")
    elif step == WizardStep.PAYER:
        if draft.paid_by_id is None:
            return ValidationResult.invalid("Please select who paid")
    elif step == WizardStep.PARTICIPANTS:
        if not draft.participant_ids:
            return ValidationResult.invalid("Please select participants")
        if len(set(draft.participant_ids)) != len(draft.participant_ids):
            return ValidationResult.invalid("Participants must be unique")
    elif step == WizardStep.CONFIGURE:
        if draft.configuration.split_type != draft.split_type:
            return ValidationResult.invalid("Split configuration does not match the selected split type")
        if draft.configuration.participant_ids != draft.participant_ids:
            return ValidationResult.invalid("Split configuration does not match the selected participants")
        return preview(draft).validation

    return ValidationResult.ok()


def advance(draft: SplitBillDraft) -> SplitBillDraft:
    """
    Move to the next step.

    Leaving the split type step with a different split type or participant
    set than the current configuration replaces the configuration with
    defaults for the selected split type.

    Raises:
        ValidationError: If the current step is incomplete or is the last step
    """
    if draft.current_step == WizardStep.REVIEW:
        raise ValidationError("Already at the review step; submit the split bill instead")

    result = step_validation(draft)
    if not result.is_valid:
        raise ValidationError(result.error)

    configuration = draft.configuration
    if draft.current_step == WizardStep.SPLIT_TYPE and (
        configuration.split_type != draft.split_type
        or configuration.participant_ids != draft.participant_ids
    ):
        configuration = reset_configuration(
            draft.participant_ids, draft.split_type, draft.total_amount
        )

    return draft.model_copy(
        update={
            "current_step": WizardStep(draft.current_step + 1),
            "configuration": configuration,
        }
    )


def go_back(draft: SplitBillDraft) -> SplitBillDraft:
    """Move to the previous step; the first step stays where it is."""
    if draft.current_step == WizardStep.DETAILS:
        return draft
    return draft.model_copy(update={"current_step": WizardStep(draft.current_step - 1)})


def submit(draft: SplitBillDraft, currency: str = "USD") -> SplitBill:
    """
    Finalize the draft into an immutable SplitBill.

    Args:
        draft: Draft at the review step
        currency: Currency code recorded on the bill

    Returns:
        Created SplitBill

    Raises:
        ValidationError: If the draft is not at the review step or any step is incomplete
    """
    if draft.current_step != WizardStep.REVIEW:
        raise ValidationError("Split bill can only be created from the review step")

    for step in WizardStep:
        result = step_validation(draft, step)
        if not result.is_valid:
            raise ValidationError(result.error, details={"step": step.title})

    logger.debug("Submitting split bill draft %r", draft.title)
    return SplitBillService.create_split_bill(
        SplitBillCreate(
            title=draft.title,
            total_amount=draft.total_amount,
            paid_by_id=draft.paid_by_id,
            expense_date=draft.expense_date,
            category=draft.category,
            notes=draft.notes,
            group_id=draft.group_id,
            currency=currency,
            configuration=draft.configuration.to_strategy_config(),
        )
    )
