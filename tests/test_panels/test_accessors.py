"""Tests for panel accessor functions."""

import numpy as np
import pytest

from treatment_panels import (
    BalancedPanelBuilder,
    build_panel,
    decompose_y,
    first_treated_period_ids,
    first_treated_period_labels,
    length_T0,
    length_T1,
    treated_ids,
    treated_labels,
)
from treatment_panels.panels import get_y00, get_y01, get_y10, get_y11


@pytest.fixture
def build(simple_panel, config):
    def _build(treatment):
        return BalancedPanelBuilder(simple_panel, treatment, config=config).build()
    return _build


class TestTinyScenario:
    def test_accessors(self, tiny_df):
        panel = build_panel(tiny_df, ("a", 2), unit_col="id", time_col="period",
                            outcome_col="value")
        assert treated_ids(panel) == 0
        assert treated_labels(panel) == "a"
        assert first_treated_period_ids(panel) == 1
        assert first_treated_period_labels(panel) == 2
        assert length_T0(panel) == 1
        assert length_T1(panel) == 1


class TestSingleContinuous:
    def test_treated_ids(self, build):
        panel = build(("C", 2004))
        assert treated_ids(panel) == 2
        assert isinstance(treated_ids(panel), int)
        assert treated_labels(panel) == "C"

    def test_first_period(self, build):
        panel = build(("C", 2004))
        assert first_treated_period_ids(panel) == 4
        assert first_treated_period_labels(panel) == 2004

    def test_lengths_sum_to_T(self, build):
        panel = build(("C", 2004))
        assert length_T0(panel) == 4
        assert length_T1(panel) == 6
        assert length_T0(panel) + length_T1(panel) == panel.T

    def test_onset_in_first_period(self, build):
        panel = build(("A", 2000))
        assert length_T0(panel) == 0
        assert length_T1(panel) == panel.T

    def test_decompose_shapes(self, build):
        panel = build(("C", 2004))
        y10, y11, y00, y01 = decompose_y(panel)
        t0 = length_T0(panel)
        assert y10.shape == (t0,)
        assert y11.shape == (panel.T - t0,)
        assert y00.shape == (panel.N - 1, t0)
        assert y01.shape == (panel.N - 1, panel.T - t0)

    def test_decompose_values(self, build):
        panel = build(("C", 2004))
        parts = decompose_y(panel)
        np.testing.assert_array_equal(parts.y10, [20, 21, 22, 23])
        np.testing.assert_array_equal(parts.y11, [24, 25, 26, 27, 28, 29])
        np.testing.assert_array_equal(parts.y00[:, 0], [0, 10, 30, 40])
        np.testing.assert_array_equal(parts.y01[:, 0], [4, 14, 34, 44])

    def test_block_getters_match_decompose(self, build):
        panel = build(("C", 2004))
        parts = decompose_y(panel)
        np.testing.assert_array_equal(get_y10(panel), parts.y10)
        np.testing.assert_array_equal(get_y11(panel), parts.y11)
        np.testing.assert_array_equal(get_y00(panel), parts.y00)
        np.testing.assert_array_equal(get_y01(panel), parts.y01)

    def test_blocks_cover_Y(self, build):
        panel = build(("B", 2007))
        parts = decompose_y(panel)
        assert parts.y10.size + parts.y11.size + parts.y00.size + parts.y01.size == panel.Y.size


class TestSingleDiscontinuous:
    def test_single_window(self, build):
        panel = build(("B", (2003, 2005)))
        assert treated_ids(panel) == 1
        assert first_treated_period_ids(panel) == [3]
        assert first_treated_period_labels(panel) == [2003]

    def test_lengths_exclude_post_window(self, build):
        panel = build(("B", (2003, 2005)))
        assert length_T0(panel) == 3
        assert length_T1(panel) == 3
        assert length_T0(panel) + length_T1(panel) < panel.T

    def test_window_to_last_period(self, build):
        panel = build(("B", (2003, 2009)))
        assert length_T0(panel) + length_T1(panel) == panel.T

    def test_several_windows(self, build):
        panel = build(("A", [(2001, 2002), (2006, 2008)]))
        assert first_treated_period_ids(panel) == [1, 6]
        assert length_T0(panel) == 1
        assert length_T1(panel) == 3

    def test_adjacent_windows_merge(self, build):
        panel = build(("A", [(2001, 2002), (2003, 2004)]))
        assert first_treated_period_ids(panel) == [1]
        assert length_T1(panel) == 4

    def test_decompose_not_implemented(self, build):
        panel = build(("B", (2003, 2005)))
        with pytest.raises(NotImplementedError, match="single-unit continuous"):
            decompose_y(panel)


class TestMultiple:
    def test_treated_ids(self, build):
        panel = build([("D", 2006), ("A", 2003)])
        np.testing.assert_array_equal(treated_ids(panel), [0, 3])
        assert list(treated_labels(panel)) == ["A", "D"]

    def test_row_wise_first_period(self, build):
        panel = build([("D", 2006), ("A", 2003)])
        np.testing.assert_array_equal(first_treated_period_ids(panel), [3, 6])
        assert list(first_treated_period_labels(panel)) == [2003, 2006]

    def test_row_wise_lengths(self, build):
        panel = build([("D", 2006), ("A", 2003)])
        np.testing.assert_array_equal(length_T0(panel), [3, 6])
        np.testing.assert_array_equal(length_T1(panel), [7, 4])

    def test_discontinuous(self, build):
        panel = build([("A", (2001, 2002)), ("C", (2004, 2008))])
        assert first_treated_period_ids(panel) == [[1], [4]]
        assert first_treated_period_labels(panel) == [[2001], [2004]]
        np.testing.assert_array_equal(length_T0(panel), [1, 4])
        np.testing.assert_array_equal(length_T1(panel), [2, 5])

    def test_decompose_not_implemented(self, build):
        panel = build([("A", 2003), ("B", 2003)])
        with pytest.raises(NotImplementedError):
            decompose_y(panel)
        with pytest.raises(NotImplementedError):
            get_y10(panel)


class TestReadOnly:
    def test_accessors_do_not_mutate(self, build):
        panel = build(("C", 2004))
        W, Y = panel.W.copy(), panel.Y.copy()
        decompose_y(panel)
        length_T0(panel)
        length_T1(panel)
        np.testing.assert_array_equal(panel.W, W)
        np.testing.assert_array_equal(panel.Y, Y)

    def test_repeated_calls_agree(self, build):
        panel = build([("A", 2003), ("E", 2005)])
        np.testing.assert_array_equal(treated_ids(panel), treated_ids(panel))
        np.testing.assert_array_equal(length_T0(panel), length_T0(panel))
