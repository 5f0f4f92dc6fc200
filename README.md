# goldifri

Arithmetic over the Goldilocks field (modulus `2^64 - 2^32 + 1`), its
quadratic extension `F[u]/(u^2 - 7)`, the degree-two algebra over that
extension, and the arithmetic steps of a FRI query check.

Field elements are plain Python integers; extension elements are pairs
`(c0, c1)`; algebra elements are pairs of extension elements. Operations
work the way a constraint circuit would: a result is produced from a
witness (quotient and remainder, inverse, 32-bit limb split) and then
checked. A failed check raises `goldifri.field.ConstraintError`. Inputs of
the wrong shape (mismatched lengths, unsupported arity, negative exponents)
raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `goldifri.field`: constants (`MODULUS`, `MULTIPLICATIVE_GROUP_GENERATOR`,
  `TWO_ADICITY`, `POWER_OF_TWO_GENERATOR`, `RANGE_CHECK_NB_BITS`),
  `ConstraintError`, the hints `mul_add_hint`, `reduce_hint`,
  `inverse_hint`, `split_limbs_hint`, the helpers `zero`, `one`, `neg_one`,
  `primitive_root_of_unity` and `two_adic_subgroup`, and `FieldChip` with
  `add`, `sub`, `mul`, `mul_add` (and their `_no_reduce` forms), `reduce`,
  `reduce_with_max_bits`, `inverse`, `exp`, `range_check` and
  `assert_is_equal`.
- `goldifri.conversions`: `str_array_to_int_list`, `ints_to_extension`
  and `ints_to_extension_list`.
- `goldifri.extension`: `ExtensionChip` (a `FieldChip`) with addition,
  subtraction, multiplication, `mul_add_extension`, `sub_mul_extension`,
  `scalar_mul_extension`, `inner_product_extension`, `inverse_extension`,
  `div_extension`, `exp_extension`, `reduce_with_powers`, `is_zero`,
  `lookup`, `lookup2` and checks; plus `to_extension`, `zero_extension`
  and `one_extension`.
- `goldifri.algebra`: `AlgebraChip` (an `ExtensionChip`) with addition,
  subtraction, multiplication and scalar multiplication of algebra
  elements and `partial_interpolate_ext_algebra`; plus `to_algebra`,
  `zero_algebra` and `one_algebra`.
- `goldifri.fri_info`: `CircuitShape`, the `PlonkOracle` enum, the
  `PolynomialInfo`, `OracleInfo`, `BatchInfo`, `InstanceInfo`,
  `OpeningBatch` and `Openings` containers, and the layout helpers
  (`sigmas_range`, `num_preprocessed_polys`, `fri_oracles`,
  `fri_all_polys`, `fri_zs_polys`, ...).
- `goldifri.fri`: `OpeningSet` and `FriChip(shape)` with `get_instance`,
  `to_openings`, `assert_leading_zeros`, `reduce_openings`,
  `exp_from_bits_const_base`, `calculate_subgroup_x`, `combine_initial`,
  `final_poly_eval`, `interpolate` and `compute_evaluation`.

## Example

```python
from goldifri.field import FieldChip, ConstraintError, MODULUS
from goldifri.extension import ExtensionChip

f = FieldChip()
assert f.mul_add(1, 2, 3) == 5

ext = ExtensionChip()
a = (4994088319481652598, 16489566008211790727)
b = (3797605683985595697, 13424401189265534004)
print(ext.mul_extension(a, b))

try:
    f.range_check(MODULUS)
except ConstraintError as err:
    print("rejected:", err)
```

## What this package does not do

It provides the arithmetic pieces of a FRI check, not a complete proof
verifier. It does not read proof or circuit files, has no hash function,
no Fiat-Shamir challenger and no Merkle path verification, and does not
run a full query round or a full FRI verification on its own. There is no
command-line tool.