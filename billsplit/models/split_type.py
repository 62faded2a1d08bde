"""Split type and category enums"""
import enum


class SplitType(str, enum.Enum):
    """Enum for split types"""
    EQUAL = "EQUAL"
    EXACT_AMOUNTS = "EXACT_AMOUNTS"
    PERCENTAGES = "PERCENTAGES"
    SHARES = "SHARES"
    ADJUSTMENTS = "ADJUSTMENTS"

    @property
    def label(self) -> str:
        return _SPLIT_TYPE_LABELS[self]

    @property
    def description(self) -> str:
        return _SPLIT_TYPE_DESCRIPTIONS[self]


_SPLIT_TYPE_LABELS = {
    SplitType.EQUAL: "Split Equally",
    SplitType.EXACT_AMOUNTS: "Exact Amounts",
    SplitType.PERCENTAGES: "Percentages",
    SplitType.SHARES: "Shares",
    SplitType.ADJUSTMENTS: "Adjustments",
}

_SPLIT_TYPE_DESCRIPTIONS = {
    SplitType.EQUAL: "Divide total equally among all participants",
    SplitType.EXACT_AMOUNTS: "Specify exact amount for each person",
    SplitType.PERCENTAGES: "Assign percentage of total to each person",
    SplitType.SHARES: "Use share ratios (e.g., 2:1:1)",
    SplitType.ADJUSTMENTS: "Start equal, then adjust individual amounts",
}


class TransactionCategory(str, enum.Enum):
    """Spending category attached to a split bill"""
    DINING = "Dining"
    GROCERIES = "Groceries"
    TRANSPORTATION = "Transportation"
    TRAVEL = "Travel"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    HEALTHCARE = "Healthcare"
    INCOME = "Income"
    TRANSFER = "Transfer"
    INVESTMENT = "Investment"
    OTHER = "Other"
