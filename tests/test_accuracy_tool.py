# tests/test_accuracy_tool.py

import math

import pytest

from approxtrig.core.constants import TWO_PI
from approxtrig.diagnostics import accuracy


def test_sample_points():
    xs = accuracy.sample_points()
    assert len(xs) == 200
    assert xs[0] == -TWO_PI
    assert xs[1] - xs[0] == pytest.approx(2.0 * TWO_PI / 200, abs=1e-15)
    assert max(xs) < TWO_PI

    assert accuracy.sample_points(4, 0.0, 1.0) == [0.0, 0.25, 0.5, 0.75]
    with pytest.raises(ValueError):
        accuracy.sample_points(0)

def test_default_suite_passes():
    reports = accuracy.run_default_suite()
    assert [r.name for r in reports] == [
        "cos_32", "cos_52", "cos_73", "cos_121",
        "sin_32", "sin_52", "sin_73", "sin_121",
    ]
    assert [r.digits for r in reports] == [3, 5, 7, 12] * 2
    for r in reports:
        assert r.passed, r
        assert r.max_error < r.bound

def test_check_accuracy_reports_failures():
    xs = [0.0, 1.0, 2.0]

    def off_by_a_bit(x):
        return math.cos(x) + (0.01 if x >= 1.0 else 0.0)

    r = accuracy.check_accuracy(math.cos, off_by_a_bit, 3, xs, name="bad")
    assert not r.passed
    assert r.failures == (1, 2)
    assert r.max_error == pytest.approx(0.01, abs=1e-12)
    assert r.name == "bad"
    assert "FAIL" in accuracy.format_report(r)

def test_main_prints_summary(capsys):
    assert accuracy.main([]) == 0
    out = capsys.readouterr().out
    assert "8/8 checks passed" in out
    assert "sin_121" in out

def test_main_single_tier_and_out_txt(tmp_path, capsys):
    out_file = tmp_path / "acc.txt"
    assert accuracy.main(["--tier", "52", "--samples", "50", "--out-txt", str(out_file)]) == 0
    text = out_file.read_text(encoding="utf-8")
    assert "cos_52" in text
    assert "2/2 checks passed" in text

def test_main_rejects_bad_arguments(capsys):
    assert accuracy.main(["--tier", "99"]) == 1
    assert "Unknown tier" in capsys.readouterr().err
    assert accuracy.main(["--samples", "0"]) == 1
