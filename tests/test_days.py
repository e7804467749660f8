"""Tests for day designator normalization."""

import logging

import pytest

from chefly.planner.days import normalize_day


class TestNormalizeDay:
    def test_wednesday_in_every_form(self):
        assert normalize_day("miércoles") == 2
        assert normalize_day("wednesday") == 2
        assert normalize_day(2) == 2

    @pytest.mark.parametrize(
        "designator, expected",
        [
            ("lunes", 0),
            ("Martes", 1),
            ("miercoles", 2),
            ("MIÉRCOLES", 2),
            ("jueves", 3),
            ("viernes", 4),
            ("sábado", 5),
            ("sabado", 5),
            ("domingo", 6),
            ("Monday", 0),
            ("sunday", 6),
            (" friday ", 4),
        ],
    )
    def test_day_names(self, designator, expected):
        assert normalize_day(designator) == expected

    def test_numeric_strings_and_floats(self):
        assert normalize_day("5") == 5
        assert normalize_day(3.0) == 3

    def test_idempotent(self):
        for value in ("miércoles", "wednesday", 2):
            once = normalize_day(value)
            assert normalize_day(once) == once

    def test_unknown_designator_falls_back_to_monday(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chefly.planner.days"):
            assert normalize_day("someday") == 0
        assert "Unrecognized day designator" in caplog.text

    def test_out_of_range_index_falls_back_to_monday(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chefly.planner.days"):
            assert normalize_day(7) == 0
            assert normalize_day(-1) == 0
        assert "out of range" in caplog.text

    def test_none_and_bool_fall_back(self):
        assert normalize_day(None) == 0
        assert normalize_day(True) == 0
