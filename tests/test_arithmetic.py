import pytest

from add_binary.arithmetic import normalize_sum, wrap_signed
from add_binary.core.config import Config
from add_binary.core.exceptions import (
    ArithmeticOverflow,
    OperandOutOfRange,
    UnsupportedNegativeSum,
)
from add_binary.operations.builtin import BuiltinOperation
from add_binary.operations.iterative import IterativeOperation
from add_binary.operations.recursive import RecursiveOperation


class TestWrapSigned:
    """Two's-complement wraparound"""

    @pytest.mark.parametrize("value,width,expected", [
        (2**31, 32, -(2**31)),
        (2**32 - 2, 32, -2),
        (127, 8, 127),
        (128, 8, -128),
        (-129, 8, 127),
        (0, 16, 0),
    ])
    def test_wrap(self, value, width, expected):
        assert wrap_signed(value, width) == expected


class TestNormalizeSum:
    """Width, overflow and negative-sum policies"""

    def test_plain_sum(self, config):
        assert normalize_sum(5, 3, config) == 8

    def test_negative_reinterpreted(self, config):
        assert normalize_sum(-1, 0, config) == 2**32 - 1

    def test_operand_out_of_range(self, config):
        with pytest.raises(OperandOutOfRange) as exc_info:
            normalize_sum(2**31, 0, config)
        assert exc_info.value.name == "a"
        assert exc_info.value.to_dict()["code"] == "OPERAND_OUT_OF_RANGE"

    def test_second_operand_out_of_range(self, config):
        with pytest.raises(OperandOutOfRange) as exc_info:
            normalize_sum(0, -(2**31) - 1, config)
        assert exc_info.value.name == "b"

    def test_overflow_error_policy(self, strict_config):
        with pytest.raises(ArithmeticOverflow):
            normalize_sum(2**31 - 1, 1, strict_config)

    def test_negative_overflow_error_policy(self, strict_config):
        with pytest.raises(ArithmeticOverflow):
            normalize_sum(-(2**31), -1, strict_config)

    def test_negative_error_policy(self, strict_config):
        with pytest.raises(UnsupportedNegativeSum) as exc_info:
            normalize_sum(-5, 2, strict_config)
        assert exc_info.value.total == -3

    def test_wrap_then_reject_negative(self):
        config = Config(negative_policy="error")
        with pytest.raises(UnsupportedNegativeSum):
            normalize_sum(2**31 - 1, 1, config)

    def test_narrow_width(self):
        config = Config(int_width=8)
        assert normalize_sum(100, 100, config) == 200  # wraps to -56, read as unsigned
        assert normalize_sum(-1, 0, config) == 255

    def test_wide_width(self):
        config = Config(int_width=64)
        assert normalize_sum(2**62, 2**62 - 1, config) == 2**63 - 1

    def test_uses_global_config_when_omitted(self, monkeypatch):
        monkeypatch.setenv("ADD_BINARY_NEGATIVE_POLICY", "error")
        with pytest.raises(UnsupportedNegativeSum):
            normalize_sum(-1, 0)


class TestStrategiesUnderPolicies:
    """Every strategy applies the same policies"""

    @pytest.mark.parametrize("operation", [
        BuiltinOperation(), IterativeOperation(), RecursiveOperation()
    ])
    def test_strict_rejects_negative(self, operation, strict_config):
        with pytest.raises(UnsupportedNegativeSum):
            operation.convert(-2, 1, strict_config)

    @pytest.mark.parametrize("operation", [
        BuiltinOperation(), IterativeOperation(), RecursiveOperation()
    ])
    def test_eight_bit_minus_one(self, operation):
        assert operation.convert(-1, 0, Config(int_width=8)) == "11111111"

    @pytest.mark.parametrize("operation", [
        BuiltinOperation(), IterativeOperation(), RecursiveOperation()
    ])
    def test_sixty_four_bit_all_ones(self, operation):
        assert operation.convert(-1, 0, Config(int_width=64)) == "1" * 64
