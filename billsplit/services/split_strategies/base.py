"""Base strategy interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_type import SplitType


class BaseSplitStrategy(ABC):
    """Base class for split strategies"""

    split_type: SplitType

    @abstractmethod
    def calculate_splits(self, total_amount: Decimal, config) -> List[SplitParticipant]:
        """
        Calculate split amounts for participants.

        Args:
            total_amount: Total bill amount
            config: Strategy configuration matching split_type

        Returns:
            List of SplitParticipant objects in input order
        """
        pass

    def validate_participants(self, participants: List[SplitParticipant]) -> Optional[str]:
        """
        Strategy-specific checks on computed participants.

        Returns:
            Error message, or None when the participants are acceptable
        """
        return None
