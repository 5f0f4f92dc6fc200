"""The arithmetic of a FRI query check over the Goldilocks extension field.

:class:`FriChip` builds the opening instance of a PLONK proof and evaluates the
steps a FRI verifier performs for one query. These steps are reducing the
openings, combining the initial evaluations, folding a coset by interpolation
and evaluating the final polynomial. Every arithmetic check is enforced and
raises :class:`~goldifri.field.ConstraintError` when it fails.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from goldifri.extension import (
    Extension,
    ExtensionChip,
    one_extension,
    to_extension,
    zero_extension,
)
from goldifri.field import (
    MODULUS,
    MULTIPLICATIVE_GROUP_GENERATOR,
    ConstraintError,
    primitive_root_of_unity,
)
from goldifri.fri_info import (
    BatchInfo,
    CircuitShape,
    InstanceInfo,
    OpeningBatch,
    Openings,
    fri_all_polys,
    fri_oracles,
    fri_zs_polys,
)

MAX_ARITY_BITS = 8
"""Largest folding arity, in bits, that :meth:`FriChip.compute_evaluation` accepts."""


@dataclass
class OpeningSet:
    """Claimed values of every committed polynomial at ``zeta`` and ``zeta * g``."""

    constants: list[Extension] = field(default_factory=list)
    plonk_sigmas: list[Extension] = field(default_factory=list)
    wires: list[Extension] = field(default_factory=list)
    plonk_zs: list[Extension] = field(default_factory=list)
    plonk_zs_next: list[Extension] = field(default_factory=list)
    partial_products: list[Extension] = field(default_factory=list)
    quotient_polys: list[Extension] = field(default_factory=list)


def _check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ConstraintError(f"{bit} is not a boolean")


def _reverse_bits(value: int, nb_bits: int) -> int:
    return int(format(value, f"0{nb_bits}b")[::-1], 2) if nb_bits else 0


class FriChip(ExtensionChip):
    """FRI verifier arithmetic for proofs of a circuit with the given shape."""

    def __init__(self, shape: CircuitShape) -> None:
        self.shape = shape

    def get_instance(self, zeta: Extension, degree_bits: int) -> InstanceInfo:
        """Describe the openings at ``zeta`` and at ``zeta`` times the subgroup generator."""
        zeta_batch = BatchInfo(point=zeta, polynomials=fri_all_polys(self.shape))
        generator = primitive_root_of_unity(degree_bits)
        zeta_next = self.mul_extension(to_extension(generator), zeta)
        zeta_next_batch = BatchInfo(point=zeta_next, polynomials=fri_zs_polys(self.shape))
        return InstanceInfo(
            oracles=fri_oracles(self.shape),
            batches=[zeta_batch, zeta_next_batch],
        )

    def to_openings(self, opening_set: OpeningSet) -> Openings:
        """Arrange an opening set into the two batches of the instance."""
        values = [
            *opening_set.constants,
            *opening_set.plonk_sigmas,
            *opening_set.wires,
            *opening_set.plonk_zs,
            *opening_set.partial_products,
            *opening_set.quotient_polys,
        ]
        return Openings(
            batches=[
                OpeningBatch(values=values),
                OpeningBatch(values=list(opening_set.plonk_zs_next)),
            ]
        )

    def assert_leading_zeros(self, pow_witness: int, proof_of_work_bits: int) -> None:
        """Check that the 64-bit form of ``pow_witness`` starts with enough zero bits."""
        if not 0 <= proof_of_work_bits <= 64:
            raise ValueError("proof_of_work_bits must lie in [0, 64]")
        max_pow_witness = (1 << (64 - proof_of_work_bits)) - 1
        reduced = self.reduce(pow_witness)
        if reduced > max_pow_witness:
            raise ConstraintError(
                f"proof of work {reduced} has fewer than {proof_of_work_bits} leading zeros"
            )

    def reduce_openings(self, openings: Openings, alpha: Extension) -> list[Extension]:
        """Fold the values of each batch into one element with powers of ``alpha``."""
        return [self.reduce_with_powers(batch.values, alpha) for batch in openings.batches]

    def exp_from_bits_const_base(self, base: int, exponent_bits: Sequence[int]) -> int:
        """Return ``base`` raised to the exponent whose bits are given lowest first."""
        product = 1
        for i, bit in enumerate(exponent_bits):
            _check_bit(bit)
            base_pow = pow(base, 1 << i, MODULUS)
            product = self.add(self.mul(self.mul(base_pow - 1, product), bit), product)
        return product

    def calculate_subgroup_x(self, x_index_bits: Sequence[int], n_log: int) -> int:
        """Return the domain point of the coset ``g * H`` indexed by ``x_index_bits``.

        The index bits are given lowest first and the domain is in bit-reversed order.
        """
        base = primitive_root_of_unity(n_log)
        product = self.exp_from_bits_const_base(base, list(reversed(x_index_bits)))
        return self.mul(MULTIPLICATIVE_GROUP_GENERATOR, product)

    def combine_initial(
        self,
        instance: InstanceInfo,
        evals_leaves: Sequence[Sequence[int]],
        alpha: Extension,
        subgroup_x: Extension,
        precomputed_reduced_evals: Sequence[Extension],
    ) -> Extension:
        """Combine the initial oracle evaluations into the first FRI value.

        ``evals_leaves`` holds, per oracle, the leaf values opened at the query
        point ``subgroup_x``. Each batch contributes
        ``(reduced evals - reduced openings) / (subgroup_x - point)``.
        """
        if len(instance.batches) != len(precomputed_reduced_evals):
            raise ValueError("number of batches differs from number of reduced openings")
        total = zero_extension()
        for batch, reduced_openings in zip(instance.batches, precomputed_reduced_evals):
            evals = [
                to_extension(evals_leaves[poly.oracle_index][poly.polynomial_index])
                for poly in batch.polynomials
            ]
            reduced_evals = self.reduce_with_powers(evals, alpha)
            numerator = self.sub_extension_no_reduce(reduced_evals, reduced_openings)
            denominator = self.sub_extension(subgroup_x, batch.point)
            total = self.mul_extension(self.exp_extension(alpha, len(evals)), total)
            total = self.mul_add_extension(
                numerator, self.inverse_extension(denominator), total
            )
        return total

    def final_poly_eval(self, coeffs: Sequence[Extension], point: Extension) -> Extension:
        """Evaluate the polynomial with the given coefficients, lowest first, at ``point``."""
        result = zero_extension()
        for coeff in reversed(coeffs):
            result = self.mul_add_extension(result, point, coeff)
        return result

    def interpolate(
        self,
        x: Extension,
        x_points: Sequence[Extension],
        y_points: Sequence[Extension],
        barycentric_weights: Sequence[Extension],
    ) -> Extension:
        """Evaluate at ``x`` the polynomial through the given points, in barycentric form."""
        if not len(x_points) == len(y_points) == len(barycentric_weights):
            raise ValueError(
                "x points, y points and barycentric weights differ in length"
            )
        l_x = one_extension()
        for x_point in x_points:
            l_x = self.sub_mul_extension(x, x_point, l_x)

        total = zero_extension()
        for x_point, y_point, weight in zip(x_points, y_points, barycentric_weights):
            term = self.div_extension(weight, self.sub_extension(x, x_point))
            total = self.add_extension(self.mul_extension(term, y_point), total)

        result = self.mul_extension(l_x, total)
        for x_point, y_point in zip(x_points, y_points):
            hit = int(self.is_zero(self.sub_extension(x, x_point)))
            result = self.lookup(hit, result, y_point)
        return result

    def compute_evaluation(
        self,
        x: int,
        x_index_within_coset_bits: Sequence[int],
        arity_bits: int,
        evals: Sequence[Extension],
        beta: Extension,
    ) -> Extension:
        """Fold the coset evaluations ``evals`` at ``beta`` by interpolation.

        ``evals`` is in bit-reversed order and ``x`` is the query point whose
        position within its coset is given by ``x_index_within_coset_bits``.
        """
        arity = 1 << arity_bits
        if len(evals) != arity:
            raise ValueError("number of evaluations does not match the arity")
        if arity_bits > MAX_ARITY_BITS:
            raise ValueError(f"arity bits greater than {MAX_ARITY_BITS} are not supported")

        g = primitive_root_of_unity(arity_bits)
        g_inv = pow(g, arity - 1, MODULUS)

        permuted: list[Extension] = [zero_extension()] * arity
        for i, value in enumerate(evals):
            permuted[_reverse_bits(i, arity_bits)] = value

        start = self.exp_from_bits_const_base(
            g_inv, list(reversed(x_index_within_coset_bits))
        )
        coset_start = self.mul(start, x)

        g_ext = to_extension(g)
        x_points = [to_extension(coset_start)]
        for _ in range(1, arity):
            x_points.append(self.mul_extension(x_points[-1], g_ext))

        weights = []
        for i, x_i in enumerate(x_points):
            weight = one_extension()
            for j, x_j in enumerate(x_points):
                if i != j:
                    weight = self.sub_mul_extension(x_i, x_j, weight)
            weights.append(self.inverse_extension(weight))

        return self.interpolate(beta, x_points, permuted, weights)