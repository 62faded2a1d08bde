"""Split bill calculation logic"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from billsplit.core.exceptions import EmptySplitError
from billsplit.models.split_config import (AdjustmentsConfig, EqualSplitConfig,
                                          ExactAmountsConfig,
                                          PercentagesConfig, SharesConfig,
                                          SplitConfig)
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_preview import SplitPreview
from billsplit.models.split_type import SplitType
from billsplit.models.validation_result import ValidationResult
from billsplit.services.split_strategies import get_split_strategy
from billsplit.utils.decimal_utils import (HUNDRED_PERCENT, Numeric,
                                          floor_decimal, round_decimal,
                                          sum_decimals, to_decimal)

logger = logging.getLogger(__name__)


class SplitCalculationService:
    """
    Pure computations for dividing a bill among participants.

    Allocation methods never validate their input; callers must run
    validate_split before trusting an allocation.
    """

    @staticmethod
    def calculate(total_amount: Numeric, config: SplitConfig) -> List[SplitParticipant]:
        """
        Calculate participant amounts for any split configuration.

        Args:
            total_amount: Total bill amount
            config: One of the split configuration variants

        Returns:
            List of SplitParticipant in input order

        Raises:
            EmptySplitError: If the configuration has nothing to divide by
        """
        total = round_decimal(to_decimal(total_amount))
        strategy = get_split_strategy(SplitType(config.split_type))
        participants = strategy.calculate_splits(total, config)

        logger.debug(
            "Calculated %s split of %s for %d participants",
            strategy.split_type.value, total, len(participants)
        )
        return participants

    @staticmethod
    def calculate_equal_split(
        total_amount: Numeric, participant_ids: Sequence[UUID]
    ) -> List[SplitParticipant]:
        """Split total_amount evenly; leftover cents go to the earliest participants."""
        return SplitCalculationService.calculate(
            total_amount, EqualSplitConfig(participant_ids=list(participant_ids))
        )

    @staticmethod
    def calculate_exact_amounts(amounts: Dict[UUID, Numeric]) -> List[SplitParticipant]:
        """Give each participant exactly the amount specified."""
        config = ExactAmountsConfig(amounts=amounts)
        total = sum_decimals(list(config.amounts.values()))
        return SplitCalculationService.calculate(total, config)

    @staticmethod
    def calculate_percentages(
        total_amount: Numeric, percentages: Dict[UUID, Numeric]
    ) -> List[SplitParticipant]:
        """Convert percentages of total_amount to amounts that add up to the total."""
        return SplitCalculationService.calculate(
            total_amount, PercentagesConfig(percentages=percentages)
        )

    @staticmethod
    def calculate_shares(
        total_amount: Numeric, shares: Dict[UUID, int]
    ) -> List[SplitParticipant]:
        """Divide total_amount proportionally to share weights."""
        return SplitCalculationService.calculate(
            total_amount, SharesConfig(shares=shares)
        )

    @staticmethod
    def calculate_adjustments(
        total_amount: Numeric,
        participant_ids: Sequence[UUID],
        adjustments: Optional[Dict[UUID, Numeric]] = None,
    ) -> List[SplitParticipant]:
        """Equal split plus a signed adjustment for each participant."""
        return SplitCalculationService.calculate(
            total_amount,
            AdjustmentsConfig(
                participant_ids=list(participant_ids), adjustments=adjustments or {}
            ),
        )

    @staticmethod
    def validate_split(
        total_amount: Numeric,
        participants: List[SplitParticipant],
        split_type: SplitType,
    ) -> ValidationResult:
        """
        Check that computed participants form an acceptable split.

        Args:
            total_amount: Total bill amount
            participants: Participants produced by one of the calculate methods
            split_type: Strategy the participants were computed with

        Returns:
            ValidationResult with is_valid and a human-readable error
        """
        if not participants:
            return ValidationResult.invalid("At least one participant is required")

        person_ids = [p.person_id for p in participants]
        if len(person_ids) != len(set(person_ids)):
            return ValidationResult.invalid("Participants must be unique")

        total = round_decimal(to_decimal(total_amount))
        if total < 0:
            return ValidationResult.invalid("Total amount cannot be negative")

        error = get_split_strategy(SplitType(split_type)).validate_participants(participants)
        if error:
            return ValidationResult.invalid(error)

        if any(p.amount < 0 for p in participants):
            return ValidationResult.invalid("Participant amounts cannot be negative")

        allocated = sum_decimals([p.amount for p in participants])
        if allocated != total:
            if split_type == SplitType.ADJUSTMENTS:
                return ValidationResult.invalid(
                    f"Adjustments must add up to zero (currently {allocated - total:+.2f}). "
                    f"Expected {total:.2f}, got {allocated:.2f}"
                )
            return ValidationResult.invalid(
                f"Amounts don't add up to total. Expected {total:.2f}, got {allocated:.2f}"
            )

        return ValidationResult.ok()

    @staticmethod
    def preview(total_amount: Numeric, config: SplitConfig) -> SplitPreview:
        """
        Calculate and validate a configuration in one step.

        Used for live previews while a configuration is being edited, so a
        configuration with nothing to divide by yields an invalid preview
        rather than an error.

        Args:
            total_amount: Total bill amount
            config: One of the split configuration variants

        Returns:
            SplitPreview with participants, validation and remaining amount
        """
        total = round_decimal(to_decimal(total_amount))
        try:
            participants = SplitCalculationService.calculate(total, config)
        except EmptySplitError as exc:
            return SplitPreview(
                participants=[],
                validation=ValidationResult.invalid(exc.message),
                total_allocated=Decimal("0.00"),
                remaining=total,
            )

        amounts = [p.amount for p in participants]
        return SplitPreview(
            participants=participants,
            validation=SplitCalculationService.validate_split(
                total, participants, SplitType(config.split_type)
            ),
            total_allocated=sum_decimals(amounts),
            remaining=SplitCalculationService.calculate_remaining(total, amounts),
        )

    @staticmethod
    def equal_amount_per_person(total_amount: Numeric, participant_count: int) -> Decimal:
        """
        Amount per person for an equal split, floored to the cent.

        Raises:
            EmptySplitError: If participant_count is zero or negative
        """
        if participant_count <= 0:
            raise EmptySplitError()
        return floor_decimal(to_decimal(total_amount) / participant_count)

    @staticmethod
    def round_to_cents(value: Numeric) -> Decimal:
        """Round to two decimal places, halves away from zero."""
        return round_decimal(to_decimal(value))

    @staticmethod
    def calculate_remaining(total_amount: Numeric, assigned_amounts: List[Numeric]) -> Decimal:
        """Amount still unassigned, never below zero."""
        assigned = sum_decimals([to_decimal(a) for a in assigned_amounts])
        remaining = to_decimal(total_amount) - assigned
        return round_decimal(max(Decimal("0"), remaining))

    @staticmethod
    def is_valid_percentage(percentage: Numeric) -> bool:
        return Decimal("0") <= to_decimal(percentage) <= HUNDRED_PERCENT

    @staticmethod
    def amount_per_share(total_amount: Numeric, total_shares: int) -> Decimal:
        """
        Amount per single share, floored to the cent.

        Raises:
            EmptySplitError: If total_shares is zero or negative
        """
        if total_shares <= 0:
            raise EmptySplitError(f"Total shares must be greater than 0, got {total_shares}")
        return floor_decimal(to_decimal(total_amount) / total_shares)

    @staticmethod
    def amounts_equal(a: Numeric, b: Numeric) -> bool:
        return round_decimal(to_decimal(a)) == round_decimal(to_decimal(b))
