"""Test split strategies"""

from decimal import Decimal
from uuid import uuid4

import pytest

from billsplit.core.exceptions import EmptySplitError, ValidationError
from billsplit.models.split_config import (AdjustmentsConfig, EqualSplitConfig,
                                          ExactAmountsConfig,
                                          PercentagesConfig, SharesConfig)
from billsplit.models.split_type import SplitType
from billsplit.services.split_strategies import (
    AdjustmentSplitStrategy,
    EqualSplitStrategy,
    ExactSplitStrategy,
    PercentageSplitStrategy,
    ShareSplitStrategy,
    equal_allocation,
    get_split_strategy,
)


class TestGetSplitStrategy:
    """Test get_split_strategy factory function"""

    @pytest.mark.parametrize(
        "split_type,expected",
        [
            (SplitType.EQUAL, EqualSplitStrategy),
            (SplitType.EXACT_AMOUNTS, ExactSplitStrategy),
            (SplitType.PERCENTAGES, PercentageSplitStrategy),
            (SplitType.SHARES, ShareSplitStrategy),
            (SplitType.ADJUSTMENTS, AdjustmentSplitStrategy),
        ],
    )
    def test_get_strategy(self, split_type, expected):
        """Each split type maps to its strategy"""
        strategy = get_split_strategy(split_type)
        assert isinstance(strategy, expected)
        assert strategy.split_type == split_type

    def test_get_strategy_from_plain_string(self):
        """String values are accepted as split types"""
        assert isinstance(get_split_strategy("SHARES"), ShareSplitStrategy)

    def test_unknown_split_type(self):
        """Unknown split types are rejected"""
        with pytest.raises(ValidationError, match="Unknown split type"):
            get_split_strategy("ITEMIZED")


class TestEqualAllocation:
    """Test cent-level equal allocation"""

    def test_remainder_goes_to_earliest(self):
        """101 cents over 4 parts: first part carries the extra cent"""
        assert equal_allocation(Decimal("1.01"), 4) == [26, 25, 25, 25]

    def test_no_remainder(self):
        """Evenly divisible totals have no remainder"""
        assert equal_allocation(Decimal("1.00"), 4) == [25, 25, 25, 25]

    def test_zero_parts(self):
        """Dividing by zero parts is a precondition violation"""
        with pytest.raises(EmptySplitError):
            equal_allocation(Decimal("10.00"), 0)


class TestEqualSplitStrategy:
    """Test equal split strategy"""

    @pytest.fixture
    def strategy(self):
        return EqualSplitStrategy()

    def test_equal_split_two_participants(self, strategy):
        """Test equal split with 2 participants"""
        ids = [uuid4(), uuid4()]

        splits = strategy.calculate_splits(Decimal("100.00"), EqualSplitConfig(participant_ids=ids))

        assert [s.person_id for s in splits] == ids
        assert [s.amount for s in splits] == [Decimal("50.00"), Decimal("50.00")]

    def test_equal_split_three_participants(self, strategy):
        """Test equal split with 3 participants (first participant gets the extra cent)"""
        ids = [uuid4(), uuid4(), uuid4()]

        splits = strategy.calculate_splits(Decimal("10.00"), EqualSplitConfig(participant_ids=ids))

        assert [s.amount for s in splits] == [Decimal("3.34"), Decimal("3.33"), Decimal("3.33")]
        assert sum(s.amount for s in splits) == Decimal("10.00")

    def test_equal_split_single_participant(self, strategy):
        """Test equal split with 1 participant"""
        ids = [uuid4()]

        splits = strategy.calculate_splits(Decimal("50.00"), EqualSplitConfig(participant_ids=ids))

        assert len(splits) == 1
        assert splits[0].amount == Decimal("50.00")

    def test_equal_split_zero_participants(self, strategy):
        """Test equal split with no participants signals failure"""
        with pytest.raises(EmptySplitError):
            strategy.calculate_splits(Decimal("100.00"), EqualSplitConfig(participant_ids=[]))

    def test_equal_split_zero_total(self, strategy):
        """A zero total gives everyone zero"""
        ids = [uuid4(), uuid4()]

        splits = strategy.calculate_splits(Decimal("0.00"), EqualSplitConfig(participant_ids=ids))

        assert [s.amount for s in splits] == [Decimal("0.00"), Decimal("0.00")]

    def test_equal_split_large_amount(self, strategy):
        """Test equal split with large amount"""
        ids = [uuid4() for _ in range(7)]

        splits = strategy.calculate_splits(Decimal("999999.99"), EqualSplitConfig(participant_ids=ids))

        assert sum(s.amount for s in splits) == Decimal("999999.99")
        assert max(s.amount for s in splits) - min(s.amount for s in splits) <= Decimal("0.01")


class TestExactSplitStrategy:
    """Test exact amounts strategy"""

    @pytest.fixture
    def strategy(self):
        return ExactSplitStrategy()

    def test_exact_split_uses_given_amounts(self, strategy):
        """Amounts are used as given, in input order"""
        a, b, c = uuid4(), uuid4(), uuid4()
        config = ExactAmountsConfig(amounts={a: "50", b: "70", c: "30"})

        splits = strategy.calculate_splits(Decimal("150.00"), config)

        assert [(s.person_id, s.amount) for s in splits] == [
            (a, Decimal("50.00")),
            (b, Decimal("70.00")),
            (c, Decimal("30.00")),
        ]

    def test_exact_split_does_not_redistribute(self, strategy):
        """A shortfall is left for validation to report"""
        config = ExactAmountsConfig(amounts={uuid4(): "33.33", uuid4(): "33.33", uuid4(): "33.33"})

        splits = strategy.calculate_splits(Decimal("100.00"), config)

        assert sum(s.amount for s in splits) == Decimal("99.99")

    def test_exact_split_empty(self, strategy):
        """No amounts means no participants"""
        assert strategy.calculate_splits(Decimal("10.00"), ExactAmountsConfig(amounts={})) == []


class TestPercentageSplitStrategy:
    """Test percentage split strategy"""

    @pytest.fixture
    def strategy(self):
        return PercentageSplitStrategy()

    def test_percentage_split_valid(self, strategy):
        """Test percentage split with valid percentages"""
        config = PercentagesConfig(percentages={uuid4(): "60", uuid4(): "40"})

        splits = strategy.calculate_splits(Decimal("1000.00"), config)

        assert [s.amount for s in splits] == [Decimal("600.00"), Decimal("400.00")]
        assert [s.percentage for s in splits] == [Decimal("60"), Decimal("40")]

    def test_percentage_split_with_rounding(self, strategy):
        """Rounding leftovers are handed out in input order"""
        config = PercentagesConfig(
            percentages={uuid4(): "33.333", uuid4(): "33.333", uuid4(): "33.334"}
        )

        splits = strategy.calculate_splits(Decimal("10.00"), config)

        # 3.3333 -> 3.33, 3.3333 -> 3.33, 3.3334 -> 3.33; one cent left over
        assert [s.amount for s in splits] == [Decimal("3.34"), Decimal("3.33"), Decimal("3.33")]

    def test_percentage_split_half_cent_rounds_away_from_zero(self, strategy):
        """Half cents round up before redistribution"""
        config = PercentagesConfig(percentages={uuid4(): "50", uuid4(): "50"})

        splits = strategy.calculate_splits(Decimal("0.01"), config)

        # 0.005 -> 0.01 each, so one cent is taken back from the first participant
        assert [s.amount for s in splits] == [Decimal("0.00"), Decimal("0.01")]

    def test_zero_percent_participant_never_goes_negative(self, strategy):
        """Cents taken back after rounding skip participants at zero"""
        config = PercentagesConfig(percentages={uuid4(): "0", uuid4(): "50", uuid4(): "50"})

        splits = strategy.calculate_splits(Decimal("10.01"), config)

        # 5.005 -> 5.01 twice is one cent over; it comes back from the second participant
        assert [s.amount for s in splits] == [Decimal("0.00"), Decimal("5.00"), Decimal("5.01")]

    def test_percentage_split_accepts_floats(self, strategy):
        """Float percentages are converted without binary artifacts"""
        config = PercentagesConfig(percentages={uuid4(): 12.5, uuid4(): 87.5})

        splits = strategy.calculate_splits(Decimal("80.00"), config)

        assert [s.amount for s in splits] == [Decimal("10.00"), Decimal("70.00")]

    def test_percentages_short_of_100_leave_remainder(self, strategy):
        """Only the covered share of the total is allocated"""
        config = PercentagesConfig(percentages={uuid4(): "50", uuid4(): "40"})

        splits = strategy.calculate_splits(Decimal("100.00"), config)

        assert [s.amount for s in splits] == [Decimal("50.00"), Decimal("40.00")]

    def test_validate_percentages_must_total_100(self, strategy):
        """Percentages short of 100 are reported"""
        config = PercentagesConfig(percentages={uuid4(): "50", uuid4(): "40"})
        splits = strategy.calculate_splits(Decimal("100.00"), config)

        error = strategy.validate_participants(splits)

        assert error == "Percentages must add up to 100%. Currently: 90.00%"

    def test_validate_percentage_out_of_range(self, strategy):
        """Percentages outside 0-100 are reported"""
        config = PercentagesConfig(percentages={uuid4(): "-10", uuid4(): "110"})
        splits = strategy.calculate_splits(Decimal("100.00"), config)

        assert "between 0 and 100" in strategy.validate_participants(splits)


class TestShareSplitStrategy:
    """Test shares split strategy"""

    @pytest.fixture
    def strategy(self):
        return ShareSplitStrategy()

    def test_shares_proportional(self, strategy):
        """1:2 shares of 90.00 give 30.00 and 60.00"""
        config = SharesConfig(shares={uuid4(): 1, uuid4(): 2})

        splits = strategy.calculate_splits(Decimal("90.00"), config)

        assert [s.amount for s in splits] == [Decimal("30.00"), Decimal("60.00")]
        assert [s.shares for s in splits] == [1, 2]

    def test_shares_remainder(self, strategy):
        """Floored shares leave cents for the earliest participants"""
        config = SharesConfig(shares={uuid4(): 1, uuid4(): 1, uuid4(): 1})

        splits = strategy.calculate_splits(Decimal("0.02"), config)

        assert [s.amount for s in splits] == [Decimal("0.01"), Decimal("0.01"), Decimal("0.00")]

    def test_shares_total_zero(self, strategy):
        """Shares adding up to zero cannot be divided by"""
        config = SharesConfig(shares={uuid4(): 0, uuid4(): 0})

        with pytest.raises(EmptySplitError, match="Total shares must be greater than 0"):
            strategy.calculate_splits(Decimal("10.00"), config)

    def test_validate_non_positive_share(self, strategy):
        """Shares below one are reported"""
        config = SharesConfig(shares={uuid4(): 0, uuid4(): 2})
        splits = strategy.calculate_splits(Decimal("10.00"), config)

        assert strategy.validate_participants(splits) == (
            "All participants must have valid shares (greater than 0)"
        )


class TestAdjustmentSplitStrategy:
    """Test adjustments strategy"""

    @pytest.fixture
    def strategy(self):
        return AdjustmentSplitStrategy()

    def test_adjustments_applied_to_equal_base(self, strategy):
        """Adjustments move amounts away from the equal split"""
        a, b, c = uuid4(), uuid4(), uuid4()
        config = AdjustmentsConfig(
            participant_ids=[a, b, c], adjustments={a: "5.00", c: "-5.00"}
        )

        splits = strategy.calculate_splits(Decimal("30.00"), config)

        assert [s.amount for s in splits] == [Decimal("15.00"), Decimal("10.00"), Decimal("5.00")]
        assert [s.adjustment for s in splits] == [Decimal("5.00"), Decimal("0.00"), Decimal("-5.00")]

    def test_adjustments_not_netting_to_zero_are_kept(self, strategy):
        """Unbalanced adjustments are not corrected"""
        a, b = uuid4(), uuid4()
        config = AdjustmentsConfig(participant_ids=[a, b], adjustments={a: "1.00"})

        splits = strategy.calculate_splits(Decimal("20.00"), config)

        assert sum(s.amount for s in splits) == Decimal("21.00")

    def test_adjustments_without_participants(self, strategy):
        """No participants signals failure"""
        with pytest.raises(EmptySplitError):
            strategy.calculate_splits(Decimal("20.00"), AdjustmentsConfig(participant_ids=[]))
