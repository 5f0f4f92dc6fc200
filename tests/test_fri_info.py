from hypothesis import given
from hypothesis import strategies as st

from goldifri.fri_info import (
    BatchInfo,
    CircuitShape,
    InstanceInfo,
    OpeningBatch,
    Openings,
    OracleInfo,
    PlonkOracle,
    PolynomialInfo,
    fri_all_polys,
    fri_oracles,
    fri_preprocessed_polys,
    fri_quotient_polys,
    fri_wire_polys,
    fri_zs_partial_products_polys,
    fri_zs_polys,
    num_preprocessed_polys,
    num_quotient_polys,
    num_zs_partial_products_polys,
    polynomial_info_from_range,
    sigmas_range,
)

SHAPE = CircuitShape(
    num_constants=4,
    num_routed_wires=80,
    num_wires=135,
    num_challenges=2,
    num_partial_products=9,
    quotient_degree_factor=8,
)

shapes = st.builds(
    CircuitShape,
    num_constants=st.integers(0, 20),
    num_routed_wires=st.integers(0, 100),
    num_wires=st.integers(0, 200),
    num_challenges=st.integers(0, 4),
    num_partial_products=st.integers(0, 12),
    quotient_degree_factor=st.integers(0, 16),
)


def test_polynomial_info_from_range():
    infos = polynomial_info_from_range(3, 2, 5)
    assert infos == [PolynomialInfo(3, 2), PolynomialInfo(3, 3), PolynomialInfo(3, 4)]


def test_polynomial_info_from_empty_range():
    assert polynomial_info_from_range(1, 5, 5) == []
    assert polynomial_info_from_range(1, 6, 5) == []


def test_sigmas_range_is_inclusive():
    indices = sigmas_range(SHAPE)
    assert indices[0] == SHAPE.num_constants
    assert indices[-1] == SHAPE.num_constants + SHAPE.num_routed_wires
    assert len(indices) == SHAPE.num_routed_wires + 1


def test_num_preprocessed_polys_is_last_sigma_index():
    assert num_preprocessed_polys(SHAPE) == sigmas_range(SHAPE)[-1]


def test_oracle_indices_and_blinding():
    oracles = fri_oracles(SHAPE)
    assert [o.blinding for o in oracles] == [False, True, True, True]
    assert [o.blinding for o in oracles] == [p.blinding for p in PlonkOracle]
    first_indices = [
        fri_preprocessed_polys(SHAPE)[0].oracle_index,
        fri_wire_polys(SHAPE)[0].oracle_index,
        fri_zs_partial_products_polys(SHAPE)[0].oracle_index,
        fri_quotient_polys(SHAPE)[0].oracle_index,
    ]
    assert first_indices == [0, 1, 2, 3]
    assert first_indices == [p.index for p in PlonkOracle]


def test_oracles_follow_counts():
    oracles = fri_oracles(SHAPE)
    assert oracles == [
        OracleInfo(num_preprocessed_polys(SHAPE), False),
        OracleInfo(SHAPE.num_wires, True),
        OracleInfo(num_zs_partial_products_polys(SHAPE), True),
        OracleInfo(num_quotient_polys(SHAPE), True),
    ]


def test_zs_polys_are_prefix_of_zs_partial_products():
    zs = fri_zs_polys(SHAPE)
    assert len(zs) == SHAPE.num_challenges
    assert zs == fri_zs_partial_products_polys(SHAPE)[: len(zs)]


def test_each_group_uses_its_oracle():
    groups = [
        (fri_preprocessed_polys(SHAPE), PlonkOracle.CONSTANTS_SIGMAS),
        (fri_wire_polys(SHAPE), PlonkOracle.WIRES),
        (fri_zs_partial_products_polys(SHAPE), PlonkOracle.ZS_PARTIAL_PRODUCTS),
        (fri_quotient_polys(SHAPE), PlonkOracle.QUOTIENT),
    ]
    for polys, oracle in groups:
        assert {p.oracle_index for p in polys} == {oracle.index}
        assert [p.polynomial_index for p in polys] == list(range(len(polys)))


@given(shapes)
def test_all_polys_cover_every_oracle(shape):
    polys = fri_all_polys(shape)
    oracles = fri_oracles(shape)
    assert len(polys) == sum(o.num_polys for o in oracles)
    for index, oracle in enumerate(oracles):
        count = sum(1 for p in polys if p.oracle_index == index)
        assert count == oracle.num_polys


@given(shapes)
def test_all_polys_are_ordered_by_oracle(shape):
    polys = fri_all_polys(shape)
    keys = [(p.oracle_index, p.polynomial_index) for p in polys]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_containers_hold_values():
    batch = BatchInfo(point=(1, 2), polynomials=fri_zs_polys(SHAPE))
    instance = InstanceInfo(oracles=fri_oracles(SHAPE), batches=[batch])
    assert instance.batches[0].point == (1, 2)
    assert len(instance.batches[0].polynomials) == SHAPE.num_challenges
    openings = Openings(batches=[OpeningBatch(values=[(3, 4)])])
    assert openings.batches[0].values == [(3, 4)]
    assert Openings().batches == []