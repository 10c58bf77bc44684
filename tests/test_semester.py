"""Tests for semester date windows."""

from datetime import date

import pytest

from models.semester import Semester


@pytest.mark.parametrize("year", [1990, 2023, 2024, 2100])
def test_winter_semester_window(year):
    semester = Semester(year=year, is_winter=True)

    assert semester.start_date() == date(year, 9, 1)
    assert semester.end_date() == date(year + 1, 3, 15)


@pytest.mark.parametrize("year", [1990, 2023, 2024, 2100])
def test_summer_semester_window(year):
    semester = Semester(year=year, is_winter=False)

    assert semester.start_date() == date(year, 3, 1)
    assert semester.end_date() == date(year, 9, 15)
    assert semester.start_date() < semester.end_date()


def test_out_of_range_years_have_no_dates():
    assert Semester(year=9999, is_winter=True).end_date() is None
    assert Semester(year=9999, is_winter=True).start_date() == date(9999, 9, 1)
    assert Semester(year=0, is_winter=False).start_date() is None
    assert Semester(year=10**20, is_winter=False).end_date() is None


def test_semesters_compare_by_value():
    assert Semester(2024, True) == Semester(2024, True)
    assert hash(Semester(2024, True)) == hash(Semester(2024, True))
    assert Semester(2024, True) != Semester(2024, False)
