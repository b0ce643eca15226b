"""
Umm al-Qura reference values.

Reference point: 2023-03-23 = 1 Ramadan 1444 AH, 2023-04-21 = 1 Shawwal 1444 AH.
"""

from datetime import date

import pytest

from temporal_hijri import Duration, OutOfRangeError, uaq_calendar
from temporal_hijri.engines.ummalqura import UmmAlQuraEngine

RAMADAN_1444 = date(2023, 3, 23)
SHAWWAL_1444 = date(2023, 4, 21)


@pytest.fixture(scope="module")
def uaq():
    return uaq_calendar()


def test_identity(uaq):
    assert uaq.id == "hijri-uaq"
    assert str(uaq) == "hijri-uaq"


def test_fields_of_1_ramadan_1444(uaq):
    assert uaq.year(RAMADAN_1444) == 1444
    assert uaq.month(RAMADAN_1444) == 9
    assert uaq.day(RAMADAN_1444) == 1
    assert uaq.month_code(RAMADAN_1444) == "M09"


def test_month_metrics(uaq):
    assert uaq.days_in_month(RAMADAN_1444) == 29
    assert uaq.months_in_year(RAMADAN_1444) == 12
    assert uaq.days_in_week(RAMADAN_1444) == 7
    assert uaq.day_of_week(RAMADAN_1444) == 4  # Thursday
    # Months 1-8 of 1444 total 236 days
    assert uaq.day_of_year(RAMADAN_1444) == 237


def test_leap_years(uaq):
    assert uaq.in_leap_year(date(2022, 1, 1)) is True   # 1443 AH, 355 days
    assert uaq.days_in_year(date(2022, 1, 1)) == 355
    assert uaq.in_leap_year(RAMADAN_1444) is False       # 1444 AH, 354 days


def test_date_from_fields(uaq):
    assert uaq.date_from_fields({"year": 1444, "month": 9, "day": 1}) == RAMADAN_1444


def test_add_one_month_lands_on_1_shawwal(uaq):
    out = uaq.date_add(RAMADAN_1444, Duration(months=1))
    assert out == SHAWWAL_1444
    assert uaq.month(out) == 10


def test_until_in_months(uaq):
    assert uaq.date_until(RAMADAN_1444, SHAWWAL_1444, "months") == Duration(months=1)
    assert uaq.date_until(RAMADAN_1444, SHAWWAL_1444, "days") == Duration(days=29)


def test_round_trip_over_table(uaq):
    d = date(2020, 1, 1)
    for _ in range(2000):
        h = uaq.hijri_date(d)
        assert uaq.bridge.from_hijri(*h) == d
        d = date.fromordinal(d.toordinal() + 3)


def test_out_of_range_date(uaq):
    with pytest.raises(OutOfRangeError) as ei:
        uaq.year(date(1800, 1, 1))
    assert ei.value.calendar_id == "hijri-uaq"
    assert "hijri-uaq" in str(ei.value)


def test_out_of_range_coordinate(uaq):
    with pytest.raises(OutOfRangeError):
        uaq.date_from_fields({"year": 1600, "month": 1, "day": 1})
    # Ramadan 1444 has 29 days
    with pytest.raises(OutOfRangeError):
        uaq.date_from_fields({"year": 1444, "month": 9, "day": 30})
    with pytest.raises(OutOfRangeError):
        uaq.date_from_fields({"year": 1444, "month": 9, "day": 0})


def test_engine_reports_absence():
    engine = UmmAlQuraEngine()
    assert engine.days_in_month(1444, 13) is None
    assert engine.to_gregorian(1444, 9, 30) is None  # Ramadan 1444 has 29 days
    assert engine.days_in_month(1444, 9) == 29
