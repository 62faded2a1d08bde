"""Adjustments split strategy"""

from decimal import Decimal
from typing import List

from billsplit.models.split_config import AdjustmentsConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.base import BaseSplitStrategy
from billsplit.services.split_strategies.equal_split import EqualSplitStrategy


class AdjustmentSplitStrategy(BaseSplitStrategy):
    """Strategy that starts from an equal split and applies per-person adjustments"""

    split_type = SplitType.ADJUSTMENTS

    def calculate_splits(
        self, total_amount: Decimal, config: AdjustmentsConfig
    ) -> List[SplitParticipant]:
        """
        Calculate equal split, then add each participant's adjustment.

        Adjustments are applied as given. The result only adds up to
        total_amount when the adjustments net to zero, which validation
        enforces.

        Args:
            total_amount: Total bill amount
            config: Adjustments configuration

        Returns:
            List of SplitParticipant with adjusted amounts

        Raises:
            EmptySplitError: If there are no participants
        """
        base_splits = EqualSplitStrategy().split(total_amount, config.participant_ids)

        splits = []
        for base in base_splits:
            adjustment = config.adjustments.get(base.person_id, Decimal("0.00"))
            splits.append(
                SplitParticipant(
                    person_id=base.person_id,
                    amount=base.amount + adjustment,
                    adjustment=adjustment,
                )
            )

        return splits
