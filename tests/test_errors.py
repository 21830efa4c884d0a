# -*- coding: utf-8 -*-
"""Tests for errors module."""

import pytest

from surveycalc_lib.errors import GeoidServiceError
from surveycalc_lib.errors import InvalidZoneError
from surveycalc_lib.errors import ItemError
from surveycalc_lib.errors import ParameterFileError
from surveycalc_lib.errors import SurveyCalcError


class TestInvalidZoneError:
    """Tests for InvalidZoneError exception."""

    def test_message(self):
        error = InvalidZoneError(20)
        assert error.zone == 20
        assert str(error) == "Invalid plane rectangular zone: 20 (expected 1-19)"

    def test_hierarchy(self):
        error = InvalidZoneError(0)
        assert isinstance(error, SurveyCalcError)
        assert isinstance(error, ValueError)

    def test_can_be_raised(self):
        with pytest.raises(SurveyCalcError):
            raise InvalidZoneError("IX")


class TestOtherErrors:
    """Tests for the remaining exception classes."""

    def test_parameter_file_error(self):
        error = ParameterFileError("No valid rows")
        assert isinstance(error, SurveyCalcError)
        assert isinstance(error, ValueError)
        assert str(error) == "No valid rows"

    def test_geoid_service_error(self):
        error = GeoidServiceError("timeout")
        assert isinstance(error, SurveyCalcError)
        assert not isinstance(error, ValueError)


class TestItemError:
    """Tests for ItemError dataclass (error record)."""

    def test_creation(self):
        error = ItemError(index=2, name="P3", message="no latitude/longitude")
        assert error.index == 2
        assert error.name == "P3"
        assert error.message == "no latitude/longitude"

    def test_str_with_name(self):
        error = ItemError(index=2, name="P3", message="failed")
        assert str(error) == "item 'P3': failed"

    def test_str_without_name(self):
        """Unnamed items are reported by 1-based position."""
        error = ItemError(index=2, name="", message="failed")
        assert str(error) == "item #3: failed"

    def test_immutable(self):
        error = ItemError(index=0, name="", message="failed")
        with pytest.raises(AttributeError):
            error.message = "other"

    def test_equality(self):
        assert ItemError(0, "A", "x") == ItemError(0, "A", "x")
        assert ItemError(0, "A", "x") != ItemError(1, "A", "x")
