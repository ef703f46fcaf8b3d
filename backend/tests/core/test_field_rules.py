"""Field Rules: verifies coercion, required-field detection and the update builder.

Invariants:
    - to_bool matches JavaScript truthiness
    - build_update keeps allow-list order and drops everything else
    - Present-but-None keys are applied; absent keys are not
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from lifelink.core.domain_types import DONOR_UPDATABLE_FIELDS, USER_UPDATABLE_FIELDS
from lifelink.core.errors import FieldValidationError
from lifelink.core.field_rules import (
    UpdatePlan, build_update, missing_fields, parse_row_id, to_bool, to_date,
    to_float, to_utc,
)


# --- to_bool ------------------------------------------------------------------

@pytest.mark.parametrize("value", [None, False, 0, 0.0, float("nan"), ""])
def test_to_bool_falsy_values(value):
    assert to_bool(value) is False


@pytest.mark.parametrize("value", [True, 1, -1, 0.5, "yes", "false", "0", [], {}])
def test_to_bool_truthy_values(value):
    assert to_bool(value) is True


# --- to_float -----------------------------------------------------------------

def test_to_float_accepts_numbers_and_numeric_strings():
    assert to_float(70) == 70.0
    assert to_float("72.5") == 72.5
    assert to_float(" 65") == 65.0


def test_to_float_parses_leading_number_like_parse_float():
    assert to_float("70kg") == 70.0
    assert to_float(".5") == 0.5
    assert to_float("1e2") == 100.0


def test_to_float_keeps_none():
    assert to_float(None) is None


@pytest.mark.parametrize("value", ["heavy", "", True, "inf"])
def test_to_float_rejects_non_numeric(value):
    with pytest.raises(FieldValidationError) as exc_info:
        to_float(value)
    assert exc_info.value.http_status == 400
    assert exc_info.value.fields == ["weight"]


# --- to_date ------------------------------------------------------------------

def test_to_date_parses_iso_strings():
    assert to_date("2024-03-15") == date(2024, 3, 15)
    assert to_date("2024-03-15T08:30:00Z") == date(2024, 3, 15)


def test_to_date_passes_dates_and_truncates_datetimes():
    assert to_date(date(2024, 1, 2)) == date(2024, 1, 2)
    assert to_date(datetime(2024, 1, 2, 13, 0)) == date(2024, 1, 2)


def test_to_date_blank_is_none():
    assert to_date(None) is None
    assert to_date("") is None


def test_to_date_rejects_garbage():
    with pytest.raises(FieldValidationError):
        to_date("last tuesday", field="last_donation_date")


@pytest.mark.parametrize("value", ["2024-01-15junk", "2024-01-15Tnoon", "2024-01-15 25:00"])
def test_to_date_rejects_trailing_text_after_the_date(value):
    with pytest.raises(FieldValidationError) as exc_info:
        to_date(value, field="last_donation_date")
    assert exc_info.value.fields == ["last_donation_date"]


def test_to_date_accepts_space_separated_datetime():
    assert to_date("2024-03-15 08:30:00") == date(2024, 3, 15)
    assert to_date("2024-03-15T08:30:00.000+05:30") == date(2024, 3, 15)


# --- to_utc -------------------------------------------------------------------

def test_to_utc_shifts_aware_values():
    colombo = timezone(timedelta(hours=5, minutes=30))
    shifted = to_utc(datetime(2024, 1, 1, 10, 0, tzinfo=colombo))
    assert shifted == datetime(2024, 1, 1, 4, 30, tzinfo=timezone.utc)
    assert shifted.utcoffset() == timedelta(0)


def test_to_utc_leaves_naive_values_alone():
    naive = datetime(2024, 1, 1, 10, 0)
    assert to_utc(naive) is naive


# --- parse_row_id -------------------------------------------------------------

def test_parse_row_id_accepts_digit_strings_and_ints():
    assert parse_row_id("42") == 42
    assert parse_row_id(7) == 7


@pytest.mark.parametrize("value", ["abc", "", "1.5", "-3", " 4", "١٢", True, -1])
def test_parse_row_id_rejects_everything_else(value):
    assert parse_row_id(value) is None


# --- missing_fields -----------------------------------------------------------

def test_missing_fields_reports_absent_and_falsy_in_order():
    payload = {"a": "x", "b": "", "d": 0}
    assert missing_fields(payload, ("a", "b", "c", "d")) == ["b", "c", "d"]


def test_missing_fields_empty_when_all_present():
    assert missing_fields({"a": "x", "b": 1}, ("a", "b")) == []


# --- build_update -------------------------------------------------------------

def test_build_update_intersects_with_allow_list():
    plan = build_update(
        {"email": "new@example.com", "role": "admin", "name": "Kamal"},
        USER_UPDATABLE_FIELDS,
    )
    assert plan.columns == ("name", "email")
    assert plan.values == ("Kamal", "new@example.com")


def test_build_update_follows_allow_list_order_not_payload_order():
    plan = build_update(
        {"area": "Nugegoda", "full_name": "A", "phone": "077"},
        DONOR_UPDATABLE_FIELDS,
    )
    assert plan.columns == ("full_name", "phone", "area")


def test_build_update_applies_present_none_values():
    plan = build_update({"phone": None}, USER_UPDATABLE_FIELDS)
    assert plan.assignments() == {"phone": None}


def test_build_update_empty_when_nothing_allowed():
    plan = build_update({"email": "x", "blood_type": "A+"}, DONOR_UPDATABLE_FIELDS)
    assert plan.is_empty
    assert plan == UpdatePlan(columns=(), values=())


def test_build_update_runs_coercers_for_their_columns_only():
    plan = build_update(
        {"weight": "80kg", "has_disease": "no", "area": "Kandy"},
        DONOR_UPDATABLE_FIELDS,
        {"weight": to_float, "has_disease": to_bool},
    )
    assert plan.assignments() == {
        "weight": 80.0, "has_disease": True, "area": "Kandy",
    }


def test_donor_allow_list_excludes_identity_fields():
    for column in ("email", "blood_type", "date_of_birth", "gender", "terms_accepted"):
        assert column not in DONOR_UPDATABLE_FIELDS
