# tests/test_api.py

from datetime import date, timedelta
from fractions import Fraction

import pytest

import hilal
from hilal import CalendarDate, CalendarSystem, Weekday
from hilal.engines.factory import make_engine, tweak
from hilal.engines.specs import APPROX


def test_clamp_on_month_change_gregorian():
    d = CalendarDate.gregorian(2024, 1, 31)
    assert hilal.adjust_date(d, month=2) == CalendarDate.gregorian(2024, 2, 29)
    assert hilal.adjust_date(d, month=4) == CalendarDate.gregorian(2024, 4, 30)
    assert hilal.adjust_date(d, month=3) == CalendarDate.gregorian(2024, 3, 31)


def test_clamp_on_year_change_gregorian():
    d = CalendarDate.gregorian(2024, 2, 29)
    assert hilal.adjust_date(d, year=2023) == CalendarDate.gregorian(2023, 2, 28)
    assert hilal.adjust_date(d, year=2028) == CalendarDate.gregorian(2028, 2, 29)


def test_clamp_on_month_change_lunar():
    d = CalendarDate.lunar(1445, 1, 30)
    for m in range(1, 13):
        out = hilal.adjust_date(d, month=m)
        assert out.day == hilal.max_day_for_month(m, 1445, "lunar")
        assert out.system is CalendarSystem.LUNAR


def test_clamp_day_never_out_of_range():
    for system in CalendarSystem:
        for m in range(1, 13):
            for day in (0, 1, 28, 29, 30, 31):
                out = hilal.clamp_day(CalendarDate(day, m, 2023, system))
                assert 1 <= out.day <= hilal.max_day_for_month(m, 2023, system)


def test_clamp_keeps_valid_date_object():
    d = CalendarDate.gregorian(2024, 5, 17)
    assert hilal.clamp_day(d) is d


def test_validate_date():
    assert hilal.validate_date(CalendarDate.lunar(1446, 2, 29))
    with pytest.raises(hilal.InvalidDayError):
        hilal.validate_date(CalendarDate.lunar(1446, 2, 30))
    with pytest.raises(hilal.InvalidMonthError):
        hilal.validate_date(CalendarDate.gregorian(2024, 13, 1))
    with pytest.raises(ValueError):
        hilal.validate_date(CalendarDate.gregorian(2023, 2, 29))
    with pytest.raises(hilal.HilalError):
        hilal.validate_date(CalendarDate.gregorian(2023, 1, 0))


def test_selectable_days():
    assert hilal.selectable_days(2, 2024, "gregorian") == range(1, 30)
    assert hilal.selectable_days(1, 1446, "lunar") == range(1, 31)
    assert hilal.selectable_days(12, 1446, "lunar") == range(1, 30)


def test_selectable_years():
    today = date(2024, 1, 1)
    assert hilal.selectable_years(today=today) == range(1824, 2125)
    assert hilal.selectable_years("lunar", today=today) == range(1245, 1546)
    assert hilal.selectable_years(today=today, past=0, future=0) == range(2024, 2025)
    assert hilal.FIXED_YEAR_RANGE[0] == 1900 and hilal.FIXED_YEAR_RANGE[-1] == 2100


def test_day_info_gregorian():
    info = hilal.day_info(date(2024, 1, 1))
    assert info.gregorian == CalendarDate.gregorian(2024, 1, 1)
    assert info.lunar == CalendarDate.lunar(1445, 6, 21)
    assert info.weekday is Weekday.MONDAY
    assert info.engine.name == "approx"
    assert info.festival_tags == ()
    assert info.attributes is None
    assert info.debug is None


def test_day_info_lunar_with_tags_and_attributes():
    info = hilal.day_info(
        CalendarDate.lunar(1446, 9, 1),
        attributes=("weekday_name", "month_names", "observances"),
        debug=True,
    )
    assert info.festival_tags == ("ramadan_start",)
    assert info.lunar == CalendarDate.lunar(1446, 9, 1)
    assert info.attributes["lunar_month"] == {"en": "Ramadan", "ar": "رمضان"}
    assert info.attributes["observances"] == [{"en": "1st of Ramadan", "ar": "أول رمضان"}]
    assert info.attributes["weekday_name"]["en"] == hilal.weekday_name(info.weekday)
    assert info.debug["jdn"] == info.debug["elapsed_days"] + hilal.engine_info("approx")["epoch_jdn"]


def test_unknown_attribute():
    with pytest.raises(KeyError):
        hilal.day_info(date(2024, 1, 1), attributes=("moon_phase",))


def test_registry():
    assert "approx" in hilal.list_engines()
    info = hilal.engine_info("approx")
    assert info["mean_year"] == Fraction(354367, 1000)
    assert info["month_lengths"] == (30, 29) * 6
    with pytest.raises(KeyError):
        hilal.engine_info("astronomical")
    with pytest.raises(KeyError):
        hilal.register_engine("approx", make_engine(APPROX))


def test_registered_variant_engine():
    spec = tweak(APPROX, epoch=date(622, 7, 19))
    hilal.register_engine("approx-late-epoch", hilal.make_engine(spec), overwrite=True)

    t = CalendarDate.lunar(1446, 1, 1)
    base = hilal.to_gregorian(t).to_date()
    late = hilal.to_gregorian(t, engine="approx-late-epoch").to_date()
    assert late - base == timedelta(days=3)
    assert hilal.to_lunar(late, engine="approx-late-epoch") == t


def test_bad_params_rejected():
    with pytest.raises(ValueError):
        tweak(APPROX, mean_year=Fraction(300))
    with pytest.raises(ValueError):
        tweak(APPROX, odd_month_days=0)


def test_list_attributes():
    assert hilal.list_attributes() == ["month_names", "observances", "weekday_name"]
