"""Domain models"""
from billsplit.models.split_type import SplitType, TransactionCategory
from billsplit.models.split_participant import SplitParticipant
from billsplit.models.split_bill import SplitBill
from billsplit.models.split_config import (
    AdjustmentsConfig,
    EqualSplitConfig,
    ExactAmountsConfig,
    PercentagesConfig,
    SharesConfig,
    SplitConfig,
)
from billsplit.models.validation_result import ValidationResult
from billsplit.models.split_preview import SplitPreview

__all__ = [
    "SplitType",
    "TransactionCategory",
    "SplitParticipant",
    "SplitBill",
    "SplitConfig",
    "EqualSplitConfig",
    "ExactAmountsConfig",
    "PercentagesConfig",
    "SharesConfig",
    "AdjustmentsConfig",
    "ValidationResult",
    "SplitPreview",
]
