"""Tests for the locale tables and the locale registry."""

from __future__ import annotations

import dataclasses

import pytest

from appdate.errors import AppDateError, UnknownLocaleError
from appdate.locales import (
    DE,
    DE_CH,
    EN,
    FR,
    FR_CH,
    SR,
    SR_IJE,
    LocaleTable,
    available_locales,
    get_locale_table,
    is_registered,
    register_locale,
)
from appdate.locales.en import ordinal as en_ordinal
from appdate.locales.table import LOCALIZED_FORMAT_KEYS, RELATIVE_TIME_KEYS, _REGISTRY

ALL_TABLES = [EN, DE, DE_CH, FR, FR_CH, SR, SR_IJE]


class TestRegistry:
    """Tests for the locale registry."""

    def test_builtin_locales(self) -> None:
        assert available_locales() == ["de", "de-ch", "en", "fr", "fr-ch", "sr", "sr-ije"]

    def test_lookup_is_case_insensitive(self) -> None:
        assert get_locale_table("DE-CH") is DE_CH
        assert get_locale_table("sr-IJE") is SR_IJE

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError) as info:
            get_locale_table("tlh")
        assert info.value.locale == "tlh"

    def test_unknown_locale_error_hierarchy(self) -> None:
        """UnknownLocaleError is both an AppDateError and a LookupError."""
        with pytest.raises(AppDateError):
            get_locale_table("xx")
        with pytest.raises(LookupError):
            get_locale_table(None)  # type: ignore[arg-type]

    def test_is_registered(self) -> None:
        assert is_registered("fr-ch")
        assert not is_registered("fr-be")
        assert not is_registered(None)

    def test_register_custom_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A registered table becomes available by name."""
        monkeypatch.setattr("appdate.locales.table._REGISTRY", dict(_REGISTRY))
        custom = dataclasses.replace(EN, name="en-gb", formats={**EN.formats, "L": "DD/MM/YYYY"})
        assert register_locale(custom) is custom
        assert get_locale_table("en-GB") is custom
        assert "en-gb" in available_locales()


class TestLocaleTableValidation:
    """Tests for LocaleTable construction checks."""

    def test_wrong_weekday_count(self) -> None:
        with pytest.raises(ValueError, match="weekdays must have 7 entries"):
            dataclasses.replace(EN, weekdays=EN.weekdays[:6])

    def test_wrong_month_count(self) -> None:
        with pytest.raises(ValueError, match="months_short must have 12 entries"):
            dataclasses.replace(EN, months_short=EN.months_short + ("Extra",))

    def test_week_start_range(self) -> None:
        with pytest.raises(ValueError, match="week_start"):
            dataclasses.replace(EN, week_start=7)

    def test_missing_keys(self) -> None:
        formats = {key: value for key, value in EN.formats.items() if key != "LLL"}
        with pytest.raises(ValueError, match="missing keys LLL"):
            dataclasses.replace(EN, formats=formats)


class TestTableContents:
    """Tests for the shape and content of the built-in tables."""

    @pytest.mark.parametrize("table", ALL_TABLES, ids=lambda t: t.name)
    def test_complete(self, table: LocaleTable) -> None:
        """Every built-in table has all localized formats and phrases."""
        assert set(LOCALIZED_FORMAT_KEYS) <= set(table.formats)
        assert set(RELATIVE_TIME_KEYS) <= set(table.relative_time)
        assert "%s" in table.relative_phrase("future")
        assert "%s" in table.relative_phrase("past")

    def test_weekdays_start_on_sunday(self) -> None:
        assert EN.weekdays[0] == "Sunday"
        assert DE_CH.weekdays_min[0] == "So"
        assert SR.weekdays[1] == "Ponedeljak"
        assert SR_IJE.weekdays[1] == "Ponedjeljak"

    def test_week_start(self) -> None:
        assert EN.week_start == 0
        assert all(t.week_start == 1 for t in (DE, DE_CH, FR, FR_CH, SR, SR_IJE))

    def test_invalid_date_placeholders(self) -> None:
        assert EN.invalid_date == "Invalid Date"
        assert DE.invalid_date == DE_CH.invalid_date == "Ungültiges Datum"
        assert FR.invalid_date == FR_CH.invalid_date == "Date invalide"
        assert SR.invalid_date == "Invalid Date"

    def test_swiss_variants(self) -> None:
        assert DE_CH.months_short[8] == "Sep."
        assert DE.months_short[8] == "Sept."
        assert FR.formats["L"] == "DD/MM/YYYY"
        assert FR_CH.formats["L"] == "DD.MM.YYYY"

    def test_ijekavian_differences(self) -> None:
        assert SR.weekdays[3] == "Sreda"
        assert SR_IJE.weekdays[3] == "Srijeda"
        assert SR.relative_phrase("past") == "pre %s"
        assert SR_IJE.relative_phrase("past") == "prije %s"


class TestRelativePhrase:
    """Tests for LocaleTable.relative_phrase()."""

    def test_plain_phrase(self) -> None:
        assert EN.relative_phrase("dd") == "%d days"
        assert EN.relative_phrase("dd", with_suffix=False) == "%d days"

    def test_inflected_phrase(self) -> None:
        """German uses the dative form inside "vor"/"in"."""
        assert DE.relative_phrase("dd") == "%d Tagen"
        assert DE.relative_phrase("dd", with_suffix=False) == "%d Tage"
        assert DE.relative_phrase("d") == "einem Tag"


class TestOrdinals:
    """Tests for ordinal renderers."""

    @pytest.mark.parametrize(
        "n, expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (22, "22nd"), (31, "31st"), (111, "111th")],
    )
    def test_english(self, n: int, expected: str) -> None:
        assert en_ordinal(n) == expected

    def test_other_languages(self) -> None:
        assert DE.ordinal(3) == "3."
        assert SR.ordinal(3) == "3."
        assert FR.ordinal(1) == "1er"
        assert FR.ordinal(2) == "2"
