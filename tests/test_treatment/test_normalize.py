"""Tests for treatment specification normalization."""

import datetime

import numpy as np
import pandas as pd
import pytest

from treatment_panels import ConfigurationError, ShapeError, TreatmentEntry, normalize_treatment


class TestSinglePair:
    def test_unit_and_period(self):
        assert normalize_treatment(("a", 2)) == (TreatmentEntry("a", 2),)

    def test_unit_and_window(self):
        (entry,) = normalize_treatment(("a", (2, 4)))
        assert entry.onset == 2
        assert entry.end == 4
        assert entry.is_bounded

    def test_date_period(self):
        (entry,) = normalize_treatment(("a", datetime.date(2020, 3, 1)))
        assert entry.onset == datetime.date(2020, 3, 1)
        assert entry.end is None

    def test_timestamp_window(self):
        start, end = pd.Timestamp("2020-03-01"), pd.Timestamp("2020-06-01")
        (entry,) = normalize_treatment(("a", (start, end)))
        assert (entry.onset, entry.end) == (start, end)

    def test_numpy_integer_period(self):
        (entry,) = normalize_treatment(("a", np.int64(3)))
        assert entry.onset == 3

    def test_integer_unit(self):
        assert normalize_treatment((7, 2001)) == (TreatmentEntry(7, 2001),)

    def test_multiple_windows_for_one_unit(self):
        entries = normalize_treatment(("a", [(2, 3), (6, 7)]))
        assert entries == (TreatmentEntry("a", 2, 3), TreatmentEntry("a", 6, 7))


class TestCollections:
    def test_singleton_list_matches_pair(self):
        assert normalize_treatment([("a", 2)]) == normalize_treatment(("a", 2))

    def test_list_preserves_order(self):
        entries = normalize_treatment([("b", 3), ("a", 2)])
        assert [e.unit for e in entries] == ["b", "a"]

    def test_list_of_windows(self):
        entries = normalize_treatment([("a", (1, 2)), ("b", (2, 3))])
        assert all(e.is_bounded for e in entries)

    def test_tuple_of_pairs(self):
        entries = normalize_treatment((("a", 2), ("b", 3)))
        assert len(entries) == 2

    def test_mapping(self):
        entries = normalize_treatment({"a": 2, "b": 3})
        assert entries == (TreatmentEntry("a", 2), TreatmentEntry("b", 3))

    def test_mapping_of_windows(self):
        entries = normalize_treatment({"a": (2, 3)})
        assert entries == (TreatmentEntry("a", 2, 3),)


class TestInvalidShapes:
    def test_none_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="treatment"):
            normalize_treatment(None)

    def test_empty_list(self):
        with pytest.raises(ShapeError, match="at least one entry"):
            normalize_treatment([])

    def test_mixed_bounded_and_unbounded(self):
        with pytest.raises(ShapeError, match="mixes"):
            normalize_treatment([("a", 2), ("b", (2, 3))])

    def test_string_period(self):
        with pytest.raises(ShapeError, match="Unrecognised treatment period"):
            normalize_treatment(("a", "2020"))

    def test_bool_period(self):
        with pytest.raises(ShapeError):
            normalize_treatment(("a", True))

    def test_window_of_three(self):
        with pytest.raises(ShapeError):
            normalize_treatment(("a", (1, 2, 3)))

    def test_non_pair_element(self):
        with pytest.raises(ShapeError, match="not a \\(unit, period\\) pair"):
            normalize_treatment([("a", 2), "b"])

    def test_unsupported_type(self):
        with pytest.raises(ShapeError, match="Unsupported"):
            normalize_treatment("a")

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_treatment([])
