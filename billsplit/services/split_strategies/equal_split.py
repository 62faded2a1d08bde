"""Equal split strategy"""

from decimal import Decimal
from typing import List, Sequence
from uuid import UUID

from billsplit.core.exceptions import EmptySplitError
from billsplit.models.split_config import EqualSplitConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.base import BaseSplitStrategy
from billsplit.utils.decimal_utils import distribute_remainder, from_cents, to_cents


def equal_allocation(total_amount: Decimal, participant_count: int) -> List[int]:
    """
    Divide total_amount into participant_count parts, in cents.

    Every part gets the floored share; leftover cents go to the earliest parts.

    Raises:
        EmptySplitError: If participant_count is zero
    """
    if participant_count <= 0:
        raise EmptySplitError()

    total_cents = to_cents(total_amount)
    base_cents = total_cents // participant_count
    remainder = total_cents - base_cents * participant_count

    return distribute_remainder([base_cents] * participant_count, remainder)


class EqualSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting a bill equally among participants"""

    split_type = SplitType.EQUAL

    def calculate_splits(
        self, total_amount: Decimal, config: EqualSplitConfig
    ) -> List[SplitParticipant]:
        """
        Calculate equal split for all participants.

        Args:
            total_amount: Total bill amount
            config: Equal split configuration with participant_ids

        Returns:
            List of SplitParticipant with equal amounts, earliest
            participants carrying any leftover cent

        Raises:
            EmptySplitError: If there are no participants
        """
        return self.split(total_amount, config.participant_ids)

    def split(
        self, total_amount: Decimal, participant_ids: Sequence[UUID]
    ) -> List[SplitParticipant]:
        allocation = equal_allocation(total_amount, len(participant_ids))

        return [
            SplitParticipant(person_id=person_id, amount=from_cents(cents))
            for person_id, cents in zip(participant_ids, allocation)
        ]
