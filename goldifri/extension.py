"""Arithmetic in the quadratic extension of the Goldilocks field.

An extension element is a pair ``(c0, c1)`` of integers standing for
``c0 + c1 * u`` with ``u^2 = W``. Operations without ``_no_reduce`` in their
name return canonical coefficients.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from goldifri.field import ConstraintError, FieldChip

W = 7
"""The non-residue defining the extension: ``u^2 = W``."""

DTH_ROOT = 18446744069414584320
"""The Frobenius twist constant, equal to ``W^((MODULUS - 1) / 2)``."""

Extension = tuple[int, int]


def to_extension(x: int) -> Extension:
    """Embed a base field element into the extension."""
    return (x, 0)


def zero_extension() -> Extension:
    """The zero extension element."""
    return (0, 0)


def one_extension() -> Extension:
    """The one extension element."""
    return (1, 0)


def _check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ConstraintError(f"{bit} is not a boolean")


class ExtensionChip(FieldChip):
    """Quadratic extension operations on top of the checked base field."""

    def add_extension(self, a: Extension, b: Extension) -> Extension:
        """Return ``a + b``."""
        return (self.add(a[0], b[0]), self.add(a[1], b[1]))

    def add_extension_no_reduce(self, a: Extension, b: Extension) -> Extension:
        """Return ``a + b`` without reduction."""
        return (self.add_no_reduce(a[0], b[0]), self.add_no_reduce(a[1], b[1]))

    def sub_extension(self, a: Extension, b: Extension) -> Extension:
        """Return ``a - b``."""
        return (self.sub(a[0], b[0]), self.sub(a[1], b[1]))

    def sub_extension_no_reduce(self, a: Extension, b: Extension) -> Extension:
        """Return ``a - b`` without reduction."""
        return (self.sub_no_reduce(a[0], b[0]), self.sub_no_reduce(a[1], b[1]))

    def mul_extension(self, a: Extension, b: Extension) -> Extension:
        """Return ``a * b``."""
        return self.reduce_extension(self.mul_extension_no_reduce(a, b))

    def mul_extension_no_reduce(self, a: Extension, b: Extension) -> Extension:
        """Return ``a * b`` without reduction."""
        c0 = self.add_no_reduce(
            self.mul_no_reduce(a[0], b[0]),
            self.mul_no_reduce(self.mul_no_reduce(W, a[1]), b[1]),
        )
        c1 = self.add_no_reduce(
            self.mul_no_reduce(a[0], b[1]), self.mul_no_reduce(a[1], b[0])
        )
        return (c0, c1)

    def mul_add_extension(self, a: Extension, b: Extension, c: Extension) -> Extension:
        """Return ``a * b + c``."""
        return self.reduce_extension(self.mul_add_extension_no_reduce(a, b, c))

    def mul_add_extension_no_reduce(
        self, a: Extension, b: Extension, c: Extension
    ) -> Extension:
        """Return ``a * b + c`` without reduction."""
        return self.add_extension_no_reduce(self.mul_extension_no_reduce(a, b), c)

    def sub_mul_extension(self, a: Extension, b: Extension, c: Extension) -> Extension:
        """Return ``(a - b) * c``."""
        difference = self.sub_extension_no_reduce(a, b)
        return self.reduce_extension(self.mul_extension_no_reduce(difference, c))

    def scalar_mul_extension(self, a: Extension, b: int) -> Extension:
        """Multiply an extension element by a base field scalar."""
        return (self.mul(a[0], b), self.mul(a[1], b))

    def inner_product_extension(
        self,
        constant: int,
        starting_acc: Extension,
        pairs: Iterable[tuple[Extension, Extension]],
    ) -> Extension:
        """Return ``starting_acc + constant * sum(a * b for a, b in pairs)``."""
        acc = starting_acc
        for a, b in pairs:
            scaled = self.scalar_mul_extension(a, constant)
            acc = self.mul_add_extension_no_reduce(scaled, b, acc)
        return self.reduce_extension(acc)

    def inverse_extension(self, a: Extension) -> Extension:
        """Return the multiplicative inverse of a non-zero element."""
        if a[0] == 0 and a[1] == 0:
            raise ConstraintError("zero has no inverse")
        a_pow_r_minus_1 = (a[0], self.mul(a[1], DTH_ROOT))
        a_pow_r = self.mul_extension(a_pow_r_minus_1, a)
        return self.scalar_mul_extension(a_pow_r_minus_1, self.inverse(a_pow_r[0]))

    def div_extension(self, a: Extension, b: Extension) -> Extension:
        """Return ``a / b``."""
        return self.mul_extension(a, self.inverse_extension(b))

    def exp_extension(self, a: Extension, exponent: int) -> Extension:
        """Return ``a`` raised to a non-negative integer power."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        if exponent == 0:
            return one_extension()
        if exponent == 1:
            return a
        if exponent == 2:
            return self.mul_extension(a, a)
        current = a
        product = one_extension()
        for i in range(exponent.bit_length()):
            if i:
                current = self.mul_extension(current, current)
            if (exponent >> i) & 1:
                product = self.mul_extension(product, current)
        return product

    def reduce_extension(self, x: Extension) -> Extension:
        """Reduce both coefficients into the field."""
        return (self.reduce(x[0]), self.reduce(x[1]))

    def reduce_with_powers(
        self, terms: Sequence[Extension], scalar: Extension
    ) -> Extension:
        """Return ``sum(term_i * scalar^i)``, evaluated by Horner's rule."""
        total = zero_extension()
        for term in reversed(terms):
            total = self.add_extension_no_reduce(
                self.mul_extension_no_reduce(total, scalar), term
            )
            total = self.reduce_extension(total)
        return total

    def is_zero(self, x: Extension) -> bool:
        """Return whether both coefficients are zero."""
        return x[0] == 0 and x[1] == 0

    def lookup(self, b: int, x: Extension, y: Extension) -> Extension:
        """Return ``x`` when the bit ``b`` is 0 and ``y`` when it is 1."""
        _check_bit(b)
        return y if b else x

    def lookup2(
        self,
        b0: int,
        b1: int,
        qe0: Extension,
        qe1: Extension,
        qe2: Extension,
        qe3: Extension,
    ) -> Extension:
        """Select one of four elements by the index ``b0 + 2 * b1``."""
        low = self.lookup(b0, qe0, qe1)
        high = self.lookup(b0, qe2, qe3)
        return self.lookup(b1, low, high)

    def assert_is_equal_extension(self, a: Extension, b: Extension) -> None:
        """Check that two extension elements are equal."""
        self.assert_is_equal(a[0], b[0])
        self.assert_is_equal(a[1], b[1])

    def range_check_extension(self, a: Extension) -> None:
        """Check that both coefficients are canonical field elements."""
        self.range_check(a[0])
        self.range_check(a[1])