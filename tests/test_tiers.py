# tests/test_tiers.py

import dataclasses

import pytest

import approxtrig
from approxtrig import Tier, UnknownTierError
from approxtrig.engines.tiers import ALL_TIERS, TIER_32, TIER_52, TIER_73, TIER_121


def test_coefficient_tables_are_verbatim():
    assert TIER_32.coefficients == (0.99940307, -0.49558072, 0.03679168)
    assert TIER_52.coefficients == (0.9999932946, -0.4999124376, 0.0414877472, -0.0012712095)
    assert TIER_73.coefficients == (
        0.999999953464, -0.499999053455, 0.0416635846769, -0.0013853704264, 0.00002315393167,
    )
    assert TIER_121.coefficients == (
        0.99999999999925182,
        -0.49999999997024012,
        0.041666666473384543,
        -0.001388888418000423,
        0.0000248010406484558,
        -0.0000002752469638432,
        0.0000000019907856854,
    )

def test_term_counts_and_digits():
    assert [t.terms for t in (TIER_32, TIER_52, TIER_73, TIER_121)] == [3, 4, 5, 7]
    assert [t.digits for t in (TIER_32, TIER_52, TIER_73, TIER_121)] == [3.2, 5.2, 7.3, 12.1]

def test_tolerance_uses_whole_digits():
    assert TIER_32.tolerance == pytest.approx(1e-3)
    assert TIER_52.tolerance == pytest.approx(1e-5)
    assert TIER_73.tolerance == pytest.approx(1e-7)
    assert TIER_121.tolerance == pytest.approx(1e-12)

def test_registry_is_read_only():
    assert set(ALL_TIERS) == {"32", "52", "73", "121"}
    with pytest.raises(TypeError):
        ALL_TIERS["99"] = TIER_32  # type: ignore[index]

def test_tier_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        TIER_32.digits = 4.0  # type: ignore[misc]

def test_tier_validation():
    with pytest.raises(ValueError):
        Tier(key="x", digits=1.0, coefficients=())
    with pytest.raises(ValueError):
        Tier(key="x", digits=0.0, coefficients=(1.0,))

def test_list_tiers_is_ordered_by_accuracy():
    assert approxtrig.list_tiers() == ["32", "52", "73", "121"]

def test_tier_info():
    info = approxtrig.tier_info("73")
    assert info["digits"] == 7.3
    assert info["terms"] == 5
    assert info["cos"] == "cos_73"
    assert info["sin"] == "sin_73"
    assert info["coefficients"] == TIER_73.coefficients

def test_unknown_tier():
    with pytest.raises(UnknownTierError) as exc:
        approxtrig.get_tier("99")
    assert isinstance(exc.value, KeyError)
    assert "Available" in str(exc.value)
    with pytest.raises(KeyError):
        approxtrig.tier_info("3.2")
