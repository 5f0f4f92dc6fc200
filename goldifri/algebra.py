"""Arithmetic in the degree-2 algebra over the quadratic extension.

An algebra element is a pair of extension elements ``(e0, e1)`` standing for
``e0 + e1 * v`` with ``v^2 = W``.
"""

from __future__ import annotations

from collections.abc import Sequence

from goldifri.extension import (
    W,
    Extension,
    ExtensionChip,
    one_extension,
    to_extension,
    zero_extension,
)

D = 2
"""Degree of the algebra over the extension field."""

Algebra = tuple[Extension, Extension]


def to_algebra(x: Extension) -> Algebra:
    """Embed an extension element into the algebra."""
    return (x, zero_extension())


def zero_algebra() -> Algebra:
    """The zero algebra element."""
    return to_algebra(zero_extension())


def one_algebra() -> Algebra:
    """The one algebra element."""
    return to_algebra(one_extension())


class AlgebraChip(ExtensionChip):
    """Operations on algebra elements over the quadratic extension."""

    def add_extension_algebra(self, a: Algebra, b: Algebra) -> Algebra:
        """Return ``a + b``."""
        return tuple(self.add_extension(x, y) for x, y in zip(a, b))

    def sub_extension_algebra(self, a: Algebra, b: Algebra) -> Algebra:
        """Return ``a - b``."""
        return tuple(self.sub_extension(x, y) for x, y in zip(a, b))

    def mul_extension_algebra(self, a: Algebra, b: Algebra) -> Algebra:
        """Return ``a * b``, folding terms of degree ``>= D`` with the factor ``W``."""
        inner: list[list[tuple[Extension, Extension]]] = [[] for _ in range(D)]
        inner_w: list[list[tuple[Extension, Extension]]] = [[] for _ in range(D)]
        for i, a_i in enumerate(a):
            for j, b_j in enumerate(b):
                target = inner if i + j < D else inner_w
                target[(i + j) % D].append((a_i, b_j))
        product = []
        for plain, wrapped in zip(inner, inner_w):
            acc = self.inner_product_extension(W, zero_extension(), wrapped)
            product.append(self.inner_product_extension(1, acc, plain))
        return tuple(product)

    def scalar_mul_extension_algebra(self, a: Extension, b: Algebra) -> Algebra:
        """Multiply every component of ``b`` by the extension element ``a``."""
        return tuple(self.mul_extension(a, component) for component in b)

    def partial_interpolate_ext_algebra(
        self,
        domain: Sequence[int],
        values: Sequence[Algebra],
        barycentric_weights: Sequence[int],
        point: Algebra,
        initial_eval: Algebra,
        initial_partial_prod: Algebra,
    ) -> tuple[Algebra, Algebra]:
        """Extend a barycentric evaluation at ``point`` by a batch of values.

        Returns the updated evaluation and the updated product of
        ``point - x`` over the domain points seen so far.
        """
        if not values:
            raise ValueError("cannot interpolate with no values")
        if len(values) != len(domain):
            raise ValueError("domain and values must have the same length")
        if len(values) != len(barycentric_weights):
            raise ValueError("domain and barycentric weights must have the same length")

        new_eval = initial_eval
        new_partial_prod = initial_partial_prod
        for x, value, weight in zip(domain, values, barycentric_weights):
            term = self.sub_extension_algebra(point, to_algebra(to_extension(x)))
            weighted = self.scalar_mul_extension_algebra(to_extension(weight), value)
            new_eval = self.mul_extension_algebra(new_eval, term)
            new_eval = self.add_extension_algebra(
                new_eval, self.mul_extension_algebra(weighted, new_partial_prod)
            )
            new_partial_prod = self.mul_extension_algebra(new_partial_prod, term)
        return new_eval, new_partial_prod