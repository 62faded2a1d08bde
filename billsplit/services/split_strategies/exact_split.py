"""Exact amounts split strategy"""
from decimal import Decimal
from typing import List

from billsplit.models.split_config import ExactAmountsConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.base import BaseSplitStrategy


class ExactSplitStrategy(BaseSplitStrategy):
    """Strategy for a split with explicitly specified amounts"""

    split_type = SplitType.EXACT_AMOUNTS

    def calculate_splits(
        self,
        total_amount: Decimal,
        config: ExactAmountsConfig
    ) -> List[SplitParticipant]:
        """
        Use the specified amounts as they are.

        No redistribution happens here; whether the amounts add up to
        total_amount is checked by validation.

        Args:
            total_amount: Total bill amount (unused)
            config: Exact amounts configuration

        Returns:
            List of SplitParticipant with the specified amounts
        """
        return [
            SplitParticipant(person_id=person_id, amount=amount)
            for person_id, amount in config.amounts.items()
        ]
