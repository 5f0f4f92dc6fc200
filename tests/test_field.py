import pytest
from hypothesis import given
from hypothesis import strategies as st

from goldifri.field import (
    MODULUS,
    RANGE_CHECK_NB_BITS,
    ConstraintError,
    FieldChip,
    inverse_hint,
    mul_add_hint,
    neg_one,
    one,
    primitive_root_of_unity,
    reduce_hint,
    split_limbs_hint,
    two_adic_subgroup,
    zero,
)

elements = st.integers(min_value=0, max_value=MODULUS - 1)
nonzero = st.integers(min_value=1, max_value=MODULUS - 1)


@pytest.fixture
def chip():
    return FieldChip()


@pytest.mark.parametrize("value", [1, 0, MODULUS - 1])
def test_range_check_accepts(chip, value):
    chip.range_check(value)
    assert chip.reduce(value) == value


def test_range_check_rejects_modulus(chip):
    with pytest.raises(ConstraintError):
        chip.range_check(MODULUS)


def test_range_check_rejects_negative(chip):
    with pytest.raises(ConstraintError):
        chip.range_check(-1)


def test_mul_add_small(chip):
    assert chip.mul_add(1, 2, 3) == 5


def test_mul_add_big_operands(chip):
    big = 9223372036854775808
    assert chip.mul_add(big, big, 3) == 18446744068340842500


def test_mul_add_rejects_out_of_field(chip):
    with pytest.raises(ConstraintError):
        chip.mul_add(MODULUS, 1, 0)


def test_constants():
    assert zero() == 0
    assert one() == 1
    assert neg_one() == 18446744069414584320


def test_hints():
    assert split_limbs_hint(2**32 + 5) == (1, 5)
    assert reduce_hint(MODULUS + 7) == (1, 7)
    assert mul_add_hint(1, 2, 3) == (0, 5)
    assert inverse_hint(0) == 0
    with pytest.raises(ValueError):
        mul_add_hint(MODULUS, 0, 0)
    with pytest.raises(ValueError):
        inverse_hint(MODULUS)
    with pytest.raises(ValueError):
        split_limbs_hint(MODULUS)


@given(elements, elements)
def test_add_sub_round_trip(a, b):
    chip = FieldChip()
    assert chip.sub(chip.add(a, b), b) == a


@given(elements, elements)
def test_mul_commutes_and_is_canonical(a, b):
    chip = FieldChip()
    product = chip.mul(a, b)
    assert product == chip.mul(b, a)
    assert 0 <= product < MODULUS


@given(elements, elements)
def test_no_reduce_then_reduce_matches(a, b):
    chip = FieldChip()
    assert chip.reduce(chip.mul_no_reduce(a, b)) == chip.mul(a, b)
    assert chip.reduce(chip.add_no_reduce(a, b)) == chip.add(a, b)
    assert chip.reduce(chip.sub_no_reduce(a, b)) == chip.sub(a, b)
    assert chip.reduce(chip.mul_add_no_reduce(a, b, a)) == chip.mul_add(a, b, a)


@given(nonzero)
def test_inverse(x):
    chip = FieldChip()
    assert chip.mul(chip.inverse(x), x) == 1


def test_inverse_of_zero_fails(chip):
    with pytest.raises(ConstraintError):
        chip.inverse(0)


def test_neg_one_squared(chip):
    assert chip.mul(neg_one(), neg_one()) == 1


@given(elements, st.integers(min_value=0, max_value=50))
def test_exp_step(x, k):
    chip = FieldChip()
    assert chip.exp(x, k + 1) == chip.mul(chip.exp(x, k), x)


def test_exp_zero_and_negative(chip):
    assert chip.exp(12345, 0) == 1
    with pytest.raises(ValueError):
        chip.exp(3, -1)


def test_reduce_quotient_bound(chip):
    with pytest.raises(ConstraintError):
        chip.reduce(MODULUS * 2**RANGE_CHECK_NB_BITS)


def test_reduce_with_max_bits(chip):
    assert chip.reduce_with_max_bits(MODULUS * 15 + 3, 4) == 3
    with pytest.raises(ConstraintError):
        chip.reduce_with_max_bits(MODULUS * 16, 4)


def test_assert_is_equal(chip):
    chip.assert_is_equal(4, 4)
    with pytest.raises(ConstraintError):
        chip.assert_is_equal(4, 5)


@pytest.mark.parametrize("n_log", [1, 2, 5, 16, 32])
def test_primitive_root_order(n_log):
    chip = FieldChip()
    root = primitive_root_of_unity(n_log)
    assert chip.exp(root, 2**n_log) == 1
    assert chip.exp(root, 2 ** (n_log - 1)) == neg_one()


def test_primitive_root_too_large():
    with pytest.raises(ValueError):
        primitive_root_of_unity(33)
    with pytest.raises(ValueError):
        two_adic_subgroup(33)


def test_two_adic_subgroup():
    subgroup = two_adic_subgroup(3)
    assert len(subgroup) == 9
    assert subgroup[0] == 1
    assert subgroup[-1] == 1
    assert len(set(subgroup[:8])) == 8
    assert subgroup[1] == primitive_root_of_unity(3)