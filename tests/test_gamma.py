# tests/test_gamma.py
from __future__ import annotations

import math

import numpy as np

from uniform_palette.gamma import build_gamma_tables, gamma_exponents, gamma_input


def test_tables_are_256_uint8_entries(gamma):
    assert len(gamma) == 256
    for table in (gamma.red, gamma.green, gamma.blue):
        assert table.dtype == np.uint8
        assert table.shape == (256,)


def test_endpoints(gamma):
    assert gamma.as_array()[0].tolist() == [0, 0, 0]
    assert gamma.as_array()[255].tolist() == [255, 255, 255]


def test_monotonic_per_channel(gamma):
    for table in (gamma.red, gamma.green, gamma.blue):
        assert np.all(np.diff(table.astype(np.int32)) >= 0)


def test_exponents_order():
    red, green, blue = gamma_exponents()
    assert green < red < blue < 1.0
    assert math.isclose(red, 1.0 - (0.299 - 0.114) / 2.0)
    assert math.isclose(green, 1.0 - (0.587 - 0.114) / 2.0)
    assert math.isclose(blue, 1.0 - (0.1141 - 0.114) / 2.0)


def test_input_overshoots_one_at_top():
    assert gamma_input(0) == 0.0
    assert gamma_input(255) > 1.0
    assert math.isclose(gamma_input(255), 256.0 / 255.0)


def test_values_are_truncated_not_rounded(gamma):
    # 255 * x^e lands at ~1.68 (red) and ~3.72 (green) for index 1
    assert int(gamma.red[1]) == 1
    assert int(gamma.green[1]) == 3


def test_matches_scalar_formula(gamma):
    exps = gamma_exponents()
    tables = (gamma.red, gamma.green, gamma.blue)
    for i in range(256):
        x = (i * 256.0 / 255.0) / 255.0
        for table, e in zip(tables, exps):
            assert int(table[i]) == int(255.0 * math.pow(x, e))


def test_rows_follow_index_order(gamma):
    rows = list(gamma.rows())
    assert [i for i, _ in rows] == list(range(256))
    assert rows[255][1] == (255, 255, 255)


def test_build_is_deterministic():
    a = build_gamma_tables()
    b = build_gamma_tables()
    assert np.array_equal(a.as_array(), b.as_array())
