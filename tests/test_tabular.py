import random

import pytest

from temporal_hijri.core.time import from_jdn, to_jdn
from temporal_hijri.engines import tabular


def test_epoch():
    assert tabular.hijri_to_jdn(1, 1, 1) == tabular.EPOCH_JDN
    assert tuple(tabular.jdn_to_hijri(tabular.EPOCH_JDN)) == (1, 1, 1)


def test_known_date():
    assert from_jdn(tabular.hijri_to_jdn(1444, 9, 1)).isoformat() == "2023-03-23"


@pytest.mark.parametrize("cycle_year", [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29])
def test_leap_years_in_cycle(cycle_year):
    assert tabular.is_leap_year(1440 + cycle_year)


def test_eleven_leap_years_per_cycle():
    assert sum(tabular.is_leap_year(y) for y in range(1441, 1471)) == 11


def test_month_lengths():
    assert [tabular.month_length(1444, m) for m in range(1, 13)] == [30, 29] * 6
    assert tabular.month_length(1445, 12) == 30


def test_jdn_round_trip():
    random.seed(42)
    for _ in range(10000):
        jdn = random.randint(1721426, 5373484)
        h = tabular.jdn_to_hijri(jdn)
        assert 1 <= h.day <= tabular.month_length(h.year, h.month)
        assert tabular.hijri_to_jdn(*h) == jdn


def test_engine_domain():
    engine = tabular.TabularEngine()
    assert engine.to_gregorian(1444, 2, 30) is None
    assert engine.to_gregorian(1444, 13, 1) is None
    assert engine.days_in_month(1444, 0) is None
    # Far beyond datetime.date
    assert engine.to_gregorian(20000, 1, 1) is None
    g = engine.to_gregorian(1444, 9, 1)
    assert g.utcoffset().total_seconds() == 0
    assert to_jdn(g.date()) == tabular.hijri_to_jdn(1444, 9, 1)
