# tests/test_minimax.py

import math

import pytest

from approxtrig.design import minimax_polys as mm
from approxtrig.engines.tiers import TIER_32, TIER_52, TIER_73


def test_max_error_of_shipped_tiers():
    assert 1e-4 < mm.max_error_of(TIER_32.coefficients) < 1e-3
    assert mm.max_error_of(TIER_52.coefficients) < 1e-5
    assert mm.max_error_of(TIER_73.coefficients) < 1e-7
    with pytest.raises(ValueError):
        mm.max_error_of(TIER_32.coefficients, num_points=1)

def test_exact_polynomial_has_no_error():
    # cos(0) only: constant 1 on the degenerate interval [0, 0]
    assert mm.max_error_of((1.0,), interval=(0.0, 0.0), num_points=3) == 0.0

def test_optimize_minimax_even_three_terms():
    np = pytest.importorskip("numpy")
    pytest.importorskip("scipy")

    coeffs, powers, err = mm.optimize_minimax_even(np.cos, (0.0, math.pi / 2.0), 3, num_points=2000)
    assert powers == [0, 2, 4]
    assert len(coeffs) == 3
    assert err < 2e-3
    assert coeffs[0] == pytest.approx(1.0, abs=5e-3)
    assert coeffs[1] == pytest.approx(-0.5, abs=2e-2)

def test_optimize_rejects_zero_terms():
    with pytest.raises(ValueError):
        mm.optimize_minimax_even(math.cos, (0.0, 1.0), 0)

def test_main_compare(capsys, tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("scipy")

    out_file = tmp_path / "fit.txt"
    assert mm.main(["--terms", "3", "--points", "1000", "--compare", "--out-txt", str(out_file)]) == 0
    out = capsys.readouterr().out
    assert "Shipped tier 32" in out
    assert "x^4" in out
    assert out_file.exists()

def test_main_rejects_bad_arguments(capsys):
    assert mm.main(["--terms", "0"]) == 1
    assert mm.main(["--points", "1"]) == 1
