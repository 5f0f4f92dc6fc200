"""Goldilocks field arithmetic with the checks an arithmetic circuit would enforce.

Field elements are plain Python integers. Operations whose name does not end in
``_no_reduce`` return canonical elements in ``[0, MODULUS)``. The ``_no_reduce``
variants only combine the raw values and leave reduction to the caller. Every
check that a constraint system would impose is evaluated directly. A failed
check raises :class:`ConstraintError`.
"""

from __future__ import annotations

MODULUS = 2**64 - 2**32 + 1
"""The Goldilocks prime ``2^64 - 2^32 + 1``."""

MULTIPLICATIVE_GROUP_GENERATOR = 7
"""Generator of the multiplicative group of the field."""

TWO_ADICITY = 32
"""Largest ``k`` such that ``2^k`` divides ``MODULUS - 1``."""

POWER_OF_TWO_GENERATOR = 1753635133440165772
"""Generator of the subgroup of order ``2^TWO_ADICITY``."""

REDUCE_NB_BITS_THRESHOLD = 254 - 64
"""Bit width at which an unreduced value must be reduced."""

RANGE_CHECK_NB_BITS = 140
"""Bit width allowed for the quotient when reducing an unreduced value."""

_TWO_32 = 2**32


class ConstraintError(Exception):
    """Raised when a value violates a constraint of the arithmetic."""


def zero() -> int:
    """The zero element."""
    return 0


def one() -> int:
    """The one element."""
    return 1


def neg_one() -> int:
    """The element ``-1``, i.e. ``MODULUS - 1``."""
    return MODULUS - 1


def mul_add_hint(a: int, b: int, c: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` of ``a * b + c`` divided by the modulus."""
    for operand in (a, b, c):
        if operand >= MODULUS:
            raise ValueError(f"{operand} is not in the field")
    return divmod(a * b + c, MODULUS)


def reduce_hint(x: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` of ``x`` divided by the modulus."""
    return divmod(x, MODULUS)


def inverse_hint(x: int) -> int:
    """Return the multiplicative inverse of ``x``, or 0 when ``x`` is 0."""
    if x >= MODULUS:
        raise ValueError("input is not in the field")
    if x % MODULUS == 0:
        return 0
    return pow(x, -1, MODULUS)


def split_limbs_hint(x: int) -> tuple[int, int]:
    """Split a field element into its ``(high, low)`` 32-bit limbs."""
    if x >= MODULUS:
        raise ValueError("input is not in the field")
    return divmod(x, _TWO_32)


def primitive_root_of_unity(n_log: int) -> int:
    """Return a primitive ``2^n_log``-th root of unity."""
    if n_log > TWO_ADICITY:
        raise ValueError("n_log is greater than TWO_ADICITY")
    root = POWER_OF_TWO_GENERATOR
    for _ in range(TWO_ADICITY - n_log):
        root = root * root % MODULUS
    return root


def two_adic_subgroup(n_log: int) -> list[int]:
    """Return the powers ``g^0 .. g^(2^n_log)`` of the ``2^n_log``-th root ``g``.

    The list holds ``2^n_log + 1`` elements; its last element wraps back to 1.
    """
    if n_log > TWO_ADICITY:
        raise ValueError("n_log is greater than TWO_ADICITY")
    root = primitive_root_of_unity(n_log)
    elements = [1]
    for _ in range(1 << n_log):
        elements.append(elements[-1] * root % MODULUS)
    return elements


def _check_bits(value: int, nb_bits: int) -> None:
    if not 0 <= value < (1 << nb_bits):
        raise ConstraintError(f"{value} does not fit in {nb_bits} bits")


class FieldChip:
    """Goldilocks operations that enforce every range and equality check."""

    def add(self, a: int, b: int) -> int:
        """Return ``a + b`` reduced into the field."""
        return self.mul_add(a, 1, b)

    def add_no_reduce(self, a: int, b: int) -> int:
        """Return ``a + b`` without reduction."""
        return a + b

    def sub(self, a: int, b: int) -> int:
        """Return ``a - b`` reduced into the field."""
        return self.mul_add(b, MODULUS - 1, a)

    def sub_no_reduce(self, a: int, b: int) -> int:
        """Return ``a + b * (MODULUS - 1)`` without reduction."""
        return a + b * (MODULUS - 1)

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b`` reduced into the field."""
        return self.mul_add(a, b, 0)

    def mul_no_reduce(self, a: int, b: int) -> int:
        """Return ``a * b`` without reduction."""
        return a * b

    def mul_add(self, a: int, b: int, c: int) -> int:
        """Return ``a * b + c`` reduced into the field."""
        try:
            quotient, remainder = mul_add_hint(a, b, c)
        except ValueError as exc:
            raise ConstraintError(str(exc)) from exc
        if c + a * b != remainder + MODULUS * quotient:
            raise ConstraintError("mul_add decomposition does not hold")
        self.range_check(quotient)
        self.range_check(remainder)
        return remainder

    def mul_add_no_reduce(self, a: int, b: int, c: int) -> int:
        """Return ``a * b + c`` without reduction."""
        return c + a * b

    def reduce(self, x: int) -> int:
        """Reduce an unreduced value whose quotient fits in ``RANGE_CHECK_NB_BITS`` bits."""
        return self.reduce_with_max_bits(x, RANGE_CHECK_NB_BITS)

    def reduce_with_max_bits(self, x: int, max_nb_bits: int) -> int:
        """Reduce ``x``, requiring its quotient to fit in ``max_nb_bits`` bits."""
        quotient, remainder = reduce_hint(x)
        _check_bits(quotient, max_nb_bits)
        self.range_check(remainder)
        return remainder

    def inverse(self, x: int) -> int:
        """Return the multiplicative inverse of ``x``."""
        try:
            inv = inverse_hint(x)
        except ValueError as exc:
            raise ConstraintError(str(exc)) from exc
        if self.mul(inv, x) != 1:
            raise ConstraintError(f"{x} has no inverse")
        return inv

    def exp(self, x: int, k: int) -> int:
        """Return ``x`` raised to the non-negative power ``k``."""
        if k == 0:
            return 1
        if k < 0:
            raise ValueError("unsupported negative exponent")
        result = x
        for i in range(k.bit_length() - 2, -1, -1):
            result = self.mul(result, result)
            if (k >> i) & 1:
                result = self.mul(result, x)
        return result

    def range_check(self, x: int) -> None:
        """Check that ``x`` is a canonical field element, i.e. ``0 <= x < MODULUS``."""
        if x < 0:
            raise ConstraintError(f"{x} is not in the field")
        try:
            high, low = split_limbs_hint(x)
        except ValueError as exc:
            raise ConstraintError(str(exc)) from exc
        if high * _TWO_32 + low != x:
            raise ConstraintError("limb decomposition does not hold")
        _check_bits(high, 32)
        _check_bits(low, 32)
        if high == _TWO_32 - 1 and low != 0:
            raise ConstraintError(f"{x} is not in the field")

    def assert_is_equal(self, x: int, y: int) -> None:
        """Check that ``x`` and ``y`` are equal."""
        if x != y:
            raise ConstraintError(f"{x} != {y}")