"""Percentage split strategy"""

from decimal import Decimal
from typing import List, Optional

from billsplit.models.split_config import PercentagesConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.base import BaseSplitStrategy
from billsplit.utils.decimal_utils import (HUNDRED_PERCENT,
                                           PERCENTAGE_TOLERANCE,
                                           distribute_remainder, from_cents,
                                           sum_decimals, to_cents)


class PercentageSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting a bill by percentage"""

    split_type = SplitType.PERCENTAGES

    def calculate_splits(
        self, total_amount: Decimal, config: PercentagesConfig
    ) -> List[SplitParticipant]:
        """
        Calculate percentage-based split for participants.

        Each share is rounded half away from zero to the cent, then the
        cents lost or gained by rounding are handed out in input order.
        Percentages within tolerance of 100 always allocate the full total.

        Args:
            total_amount: Total bill amount
            config: Percentages configuration

        Returns:
            List of SplitParticipant with calculated amounts
        """
        if not config.percentages:
            return []

        person_ids = list(config.percentages)
        percentages = list(config.percentages.values())

        # Percentages off from 100 are only allocated their own share
        total_percentage = sum_decimals(percentages)
        if abs(total_percentage - HUNDRED_PERCENT) <= PERCENTAGE_TOLERANCE:
            target_cents = to_cents(total_amount)
        else:
            target_cents = to_cents(total_amount * total_percentage / HUNDRED_PERCENT)

        rounded = [
            to_cents(total_amount * percentage / HUNDRED_PERCENT)
            for percentage in percentages
        ]
        allocation = distribute_remainder(rounded, target_cents - sum(rounded))

        return [
            SplitParticipant(
                person_id=person_id,
                amount=from_cents(cents),
                percentage=percentage,
            )
            for person_id, cents, percentage in zip(person_ids, allocation, percentages)
        ]

    def validate_participants(self, participants: List[SplitParticipant]) -> Optional[str]:
        for participant in participants:
            percentage = participant.percentage
            if percentage is None:
                return "All participants must have a percentage"
            if percentage < 0 or percentage > HUNDRED_PERCENT:
                return f"Percentage must be between 0 and 100, got {percentage}"

        total_percentage = sum_decimals([p.percentage for p in participants])
        if abs(total_percentage - HUNDRED_PERCENT) > PERCENTAGE_TOLERANCE:
            return f"Percentages must add up to 100%. Currently: {total_percentage:.2f}%"

        return None
