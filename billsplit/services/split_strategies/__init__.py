"""Split calculation strategies"""

from billsplit.core.exceptions import ValidationError
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies.adjustment_split import \
    AdjustmentSplitStrategy
from billsplit.services.split_strategies.base import BaseSplitStrategy
from billsplit.services.split_strategies.equal_split import (
    EqualSplitStrategy, equal_allocation)
from billsplit.services.split_strategies.exact_split import ExactSplitStrategy
from billsplit.services.split_strategies.percentage_split import \
    PercentageSplitStrategy
from billsplit.services.split_strategies.share_split import ShareSplitStrategy


def get_split_strategy(split_type: SplitType) -> BaseSplitStrategy:
    """
    Get appropriate split strategy based on split type.

    Args:
        split_type: Type of split

    Returns:
        Instance of appropriate strategy

    Raises:
        ValidationError: If split_type is not recognized
    """
    strategies = {
        SplitType.EQUAL: EqualSplitStrategy(),
        SplitType.EXACT_AMOUNTS: ExactSplitStrategy(),
        SplitType.PERCENTAGES: PercentageSplitStrategy(),
        SplitType.SHARES: ShareSplitStrategy(),
        SplitType.ADJUSTMENTS: AdjustmentSplitStrategy(),
    }

    strategy = strategies.get(split_type)
    if strategy is None:
        raise ValidationError(f"Unknown split type: {split_type}")

    return strategy


__all__ = [
    "BaseSplitStrategy",
    "EqualSplitStrategy",
    "ExactSplitStrategy",
    "PercentageSplitStrategy",
    "ShareSplitStrategy",
    "AdjustmentSplitStrategy",
    "equal_allocation",
    "get_split_strategy",
]
