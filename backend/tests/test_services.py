import math

import pytest
from sqlalchemy.exc import DataError
from sqlmodel import Session

from portal import services


class _Psycopg3Error(Exception):
    sqlstate = "22003"


def test_parse_score_accepts_strings_and_numbers():
    assert services.parse_score("3.5") == 3.5
    assert services.parse_score(" 7 ") == 7.0
    assert services.parse_score(6) == 6.0


@pytest.mark.parametrize("value", [None, "", "abc", True, [1]])
def test_parse_score_returns_nan_for_junk(value):
    assert math.isnan(services.parse_score(value))


def test_parse_max_fee_defaults():
    assert services.parse_max_fee(None) == 100000
    assert services.parse_max_fee("") == 100000
    assert services.parse_max_fee("nan") == 100000
    assert services.parse_max_fee("lots", default=5) == 5
    assert services.parse_max_fee("2500.5") == 2500.5


def test_is_numeric_overflow_reads_psycopg3_sqlstate():
    exc = DataError("INSERT", {}, _Psycopg3Error("numeric field overflow"))
    assert services.is_numeric_overflow(exc)
    assert not services.is_numeric_overflow(DataError("INSERT", {}, Exception("other")))


def test_application_service_rejects_before_insert(engine, application_count):
    with Session(engine) as session:
        svc = services.ApplicationService(session)
        with pytest.raises(services.RequirementsNotMet):
            svc.submit("Bo", "bo@example.com", 3, "3.2", "7.5")
        with pytest.raises(services.UniversityNotFound):
            svc.submit("Bo", "bo@example.com", None, "4.0", "9.0")
    assert application_count() == 0


def test_catalog_service_uses_configured_default(engine):
    with Session(engine) as session:
        svc = services.CatalogService(session, default_max_fee=2000)
        names = [u.name for u in svc.search(max_fee="not a number")]
    assert names == ["ETH Zurich", "Technical University of Munich"]


def test_round_score_rounds_halves_up():
    assert services.round_score(3.125) == 3.13
    assert services.round_score(2.675) == 2.68
    assert services.round_score(7.0) == 7.0
    assert math.isinf(services.round_score(math.inf))
