"""Descriptions of the polynomials and oracles that a FRI opening covers.

A PLONK proof commits to four oracles: preprocessed constants and sigmas, wires,
``Z`` and partial products, and quotient chunks. These helpers list the
polynomials of each oracle and group them into the batches opened at each point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from goldifri.extension import Extension


@dataclass(frozen=True)
class PolynomialInfo:
    """Locates one polynomial: the oracle holding it and its index there."""

    oracle_index: int
    polynomial_index: int


@dataclass(frozen=True)
class OracleInfo:
    """Number of polynomials in an oracle and whether its leaves are salted."""

    num_polys: int
    blinding: bool


class PlonkOracle(Enum):
    """The four oracles of a PLONK proof, in commitment order."""

    CONSTANTS_SIGMAS = (0, False)
    WIRES = (1, True)
    ZS_PARTIAL_PRODUCTS = (2, True)
    QUOTIENT = (3, True)

    @property
    def index(self) -> int:
        """Position of the oracle among the initial Merkle caps."""
        return self.value[0]

    @property
    def blinding(self) -> bool:
        """Whether the oracle is blinded when the proof is hiding."""
        return self.value[1]


@dataclass(frozen=True)
class CircuitShape:
    """The circuit parameters that fix how many polynomials each oracle holds."""

    num_constants: int
    num_routed_wires: int
    num_wires: int
    num_challenges: int
    num_partial_products: int
    quotient_degree_factor: int


@dataclass
class BatchInfo:
    """Polynomials opened together at a single point."""

    point: Extension
    polynomials: list[PolynomialInfo] = field(default_factory=list)


@dataclass
class InstanceInfo:
    """The oracles of a proof and the batches opened from them."""

    oracles: list[OracleInfo] = field(default_factory=list)
    batches: list[BatchInfo] = field(default_factory=list)


@dataclass
class OpeningBatch:
    """Claimed values of the polynomials in one batch."""

    values: list[Extension] = field(default_factory=list)


@dataclass
class Openings:
    """Claimed values for every batch of an instance."""

    batches: list[OpeningBatch] = field(default_factory=list)


def polynomial_info_from_range(
    oracle_index: int, start: int, end: int
) -> list[PolynomialInfo]:
    """Describe the polynomials ``start .. end - 1`` of one oracle."""
    return [PolynomialInfo(oracle_index, i) for i in range(start, end)]


def sigmas_range(shape: CircuitShape) -> list[int]:
    """Indices of the sigma polynomials in the constants-sigmas oracle.

    The range runs from ``num_constants`` up to and including
    ``num_constants + num_routed_wires``.
    """
    start = shape.num_constants
    return list(range(start, start + shape.num_routed_wires + 1))


def num_preprocessed_polys(shape: CircuitShape) -> int:
    """Number of polynomials in the constants-sigmas oracle."""
    return sigmas_range(shape)[-1]


def num_zs_partial_products_polys(shape: CircuitShape) -> int:
    """Number of polynomials in the ``Z`` and partial products oracle."""
    return shape.num_challenges * (1 + shape.num_partial_products)


def num_quotient_polys(shape: CircuitShape) -> int:
    """Number of polynomials in the quotient oracle."""
    return shape.num_challenges * shape.quotient_degree_factor


def fri_preprocessed_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """All polynomials of the constants-sigmas oracle."""
    return polynomial_info_from_range(
        PlonkOracle.CONSTANTS_SIGMAS.index, 0, num_preprocessed_polys(shape)
    )


def fri_wire_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """All polynomials of the wires oracle."""
    return polynomial_info_from_range(PlonkOracle.WIRES.index, 0, shape.num_wires)


def fri_zs_partial_products_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """All polynomials of the ``Z`` and partial products oracle."""
    return polynomial_info_from_range(
        PlonkOracle.ZS_PARTIAL_PRODUCTS.index, 0, num_zs_partial_products_polys(shape)
    )


def fri_quotient_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """All polynomials of the quotient oracle."""
    return polynomial_info_from_range(
        PlonkOracle.QUOTIENT.index, 0, num_quotient_polys(shape)
    )


def fri_zs_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """The ``Z`` polynomials, opened again at the shifted point."""
    return polynomial_info_from_range(
        PlonkOracle.ZS_PARTIAL_PRODUCTS.index, 0, shape.num_challenges
    )


def fri_oracles(shape: CircuitShape) -> list[OracleInfo]:
    """Size and blinding of each of the four oracles, in commitment order."""
    return [
        OracleInfo(num_preprocessed_polys(shape), PlonkOracle.CONSTANTS_SIGMAS.blinding),
        OracleInfo(shape.num_wires, PlonkOracle.WIRES.blinding),
        OracleInfo(
            num_zs_partial_products_polys(shape),
            PlonkOracle.ZS_PARTIAL_PRODUCTS.blinding,
        ),
        OracleInfo(num_quotient_polys(shape), PlonkOracle.QUOTIENT.blinding),
    ]


def fri_all_polys(shape: CircuitShape) -> list[PolynomialInfo]:
    """Every polynomial of every oracle, in oracle order."""
    return [
        *fri_preprocessed_polys(shape),
        *fri_wire_polys(shape),
        *fri_zs_partial_products_polys(shape),
        *fri_quotient_polys(shape),
    ]