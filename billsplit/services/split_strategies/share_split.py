"""Shares split strategy"""

from decimal import Decimal
from typing import List, Optional

from billsplit.core.exceptions import EmptySplitError
from billsplit.models.split_config import SharesConfig
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.base import BaseSplitStrategy
from billsplit.utils.decimal_utils import distribute_remainder, from_cents, to_cents


class ShareSplitStrategy(BaseSplitStrategy):
    """Strategy for splitting a bill proportionally to share weights"""

    split_type = SplitType.SHARES

    def calculate_splits(
        self, total_amount: Decimal, config: SharesConfig
    ) -> List[SplitParticipant]:
        """
        Calculate share-weighted split for participants.

        Args:
            total_amount: Total bill amount
            config: Shares configuration

        Returns:
            List of SplitParticipant with amounts proportional to shares

        Raises:
            EmptySplitError: If the shares add up to zero or less
        """
        if not config.shares:
            return []

        total_shares = sum(config.shares.values())
        if total_shares <= 0:
            raise EmptySplitError(
                f"Total shares must be greater than 0, got {total_shares}"
            )

        total_cents = to_cents(total_amount)
        floored = [
            total_cents * share // total_shares for share in config.shares.values()
        ]
        allocation = distribute_remainder(floored, total_cents - sum(floored))

        return [
            SplitParticipant(person_id=person_id, amount=from_cents(cents), shares=share)
            for (person_id, share), cents in zip(config.shares.items(), allocation)
        ]

    def validate_participants(self, participants: List[SplitParticipant]) -> Optional[str]:
        if any(p.shares is None or p.shares < 1 for p in participants):
            return "All participants must have valid shares (greater than 0)"
        return None
