"""
Unit tests for month grid arithmetic and navigation.
"""

from datetime import date, datetime, timedelta

import pytest

from daybook.core import (
    MONTH_NAMES,
    WEEKDAY_LABELS,
    build_month_grid,
    long_date,
    month_end,
    month_name,
    month_start,
    month_title,
    next_month,
    prev_month,
    week_end,
    week_start,
)

ALL_MONTHS = [date(year, month, 1) for year in (2023, 2024, 2025, 2026) for month in range(1, 13)]


def _flatten(weeks):
    return [cell for week in weeks for cell in week]


class TestMonthBounds:
    def test_month_start_and_end(self):
        assert month_start(date(2024, 2, 17)) == date(2024, 2, 1)
        assert month_end(date(2024, 2, 17)) == date(2024, 2, 29)
        assert month_end(date(2023, 2, 1)) == date(2023, 2, 28)
        assert month_end(date(2024, 12, 31)) == date(2024, 12, 31)

    def test_accepts_datetime(self):
        assert month_start(datetime(2024, 7, 19, 15, 30)) == date(2024, 7, 1)

    def test_weeks_begin_on_sunday(self):
        # 2024-03-05 is a Tuesday
        assert week_start(date(2024, 3, 5)) == date(2024, 3, 3)
        assert week_end(date(2024, 3, 5)) == date(2024, 3, 9)
        assert week_start(date(2024, 3, 3)) == date(2024, 3, 3)
        assert week_end(date(2024, 3, 9)) == date(2024, 3, 9)

    def test_title_and_labels(self):
        assert month_title(date(2024, 3, 15)) == "March 2024"
        assert WEEKDAY_LABELS[0] == "Sun"
        assert len(WEEKDAY_LABELS) == 7

    def test_english_month_names(self):
        assert len(MONTH_NAMES) == 12
        assert month_name(date(2024, 1, 31)) == "January"
        assert month_name(datetime(2024, 12, 1, 9, 0)) == "December"
        assert long_date(date(2024, 3, 5)) == "March 05, 2024"


class TestBuildMonthGrid:
    @pytest.mark.parametrize("reference", ALL_MONTHS)
    def test_rows_of_seven_with_consecutive_days(self, reference):
        weeks = build_month_grid(reference, today=date(2000, 1, 1))
        assert 4 <= len(weeks) <= 6
        assert all(len(week) == 7 for week in weeks)

        dates = [cell.date for cell in _flatten(weeks)]
        assert len(dates) % 7 == 0
        for previous, current in zip(dates, dates[1:]):
            assert current - previous == timedelta(days=1)
        assert dates[0].weekday() == 6
        assert dates[-1].weekday() == 5

    @pytest.mark.parametrize("reference", ALL_MONTHS)
    def test_every_month_day_appears_once_in_month(self, reference):
        cells = _flatten(build_month_grid(reference, today=date(2000, 1, 1)))
        in_month = [cell.date for cell in cells if cell.is_current_month]
        expected = [month_start(reference) + timedelta(days=offset) for offset in range(month_end(reference).day)]
        assert in_month == expected

    def test_february_starting_on_sunday_fits_four_rows(self):
        # February 2015 begins on a Sunday and has 28 days
        weeks = build_month_grid(date(2015, 2, 10), today=date(2000, 1, 1))
        assert len(weeks) == 4
        assert all(cell.is_current_month for cell in _flatten(weeks))

    def test_long_month_spills_into_six_rows(self):
        # March 2024 starts on a Friday and has 31 days
        weeks = build_month_grid(date(2024, 3, 1), today=date(2000, 1, 1))
        assert len(weeks) == 6
        assert weeks[0][0].date == date(2024, 2, 25)
        assert not weeks[0][0].is_current_month
        assert weeks[-1][-1].date == date(2024, 4, 6)

    def test_selected_and_today_flags(self):
        weeks = build_month_grid(
            date(2024, 3, 1),
            datetime(2024, 3, 12, 18, 45),
            today=date(2024, 3, 20),
        )
        cells = _flatten(weeks)
        assert [cell.date for cell in cells if cell.is_selected] == [date(2024, 3, 12)]
        assert [cell.date for cell in cells if cell.is_today] == [date(2024, 3, 20)]

    def test_no_selection(self):
        cells = _flatten(build_month_grid(date(2024, 3, 1), None, today=date(2024, 3, 20)))
        assert not any(cell.is_selected for cell in cells)

    def test_selection_in_adjacent_month_is_marked_on_padding(self):
        cells = _flatten(build_month_grid(date(2024, 3, 1), date(2024, 2, 26), today=date(2000, 1, 1)))
        selected = [cell for cell in cells if cell.is_selected]
        assert len(selected) == 1
        assert not selected[0].is_current_month

    def test_today_defaults_to_real_date(self):
        today = date.today()
        cells = _flatten(build_month_grid(today))
        assert [cell.date for cell in cells if cell.is_today] == [today]


class TestNavigation:
    def test_next_and_previous(self):
        assert next_month(date(2024, 1, 31)) == date(2024, 2, 1)
        assert prev_month(date(2024, 3, 31)) == date(2024, 2, 1)
        assert next_month(date(2024, 12, 15)) == date(2025, 1, 1)
        assert prev_month(date(2024, 1, 15)) == date(2023, 12, 1)

    @pytest.mark.parametrize("reference", ALL_MONTHS + [date(2024, 5, 31), date(2024, 1, 30)])
    def test_round_trip_keeps_year_and_month(self, reference):
        for result in (next_month(prev_month(reference)), prev_month(next_month(reference))):
            assert (result.year, result.month) == (reference.year, reference.month)

    def test_input_is_not_mutated(self):
        reference = date(2024, 6, 15)
        next_month(reference)
        assert reference == date(2024, 6, 15)
