import importlib.util
from pathlib import Path

import pytest
from sqlmodel import Session

from portal import repositories

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_universities.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_universities", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_catalog_skips_bad_rows():
    seed = _load_script()
    text = (
        "name,country,tuition,degree_level,min_gpa,min_ielts\n"
        "University of Oslo,Norway,0,Master,3.0,6.5\n"
        ",Norway,0,Master,3.0,6.5\n"
        "University of Bergen,Norway,free,Master,3.0,6.5\n"
    )
    rows, errors = seed.parse_catalog(text)
    assert [u.name for u in rows] == ["University of Oslo"]
    assert [e["line"] for e in errors] == [3, 4]


def test_parse_catalog_requires_columns():
    seed = _load_script()
    with pytest.raises(ValueError):
        seed.parse_catalog("name,country\nX,Y\n")


def test_seeded_rows_are_searchable(engine):
    seed = _load_script()
    rows, _ = seed.parse_catalog(
        "name,country,tuition,degree_level,min_gpa,min_ielts\n"
        "University of Oslo,Norway,0,Master,3.0,6.5\n"
    )
    with Session(engine) as session:
        repo = repositories.UniversityRepository(session)
        created = repo.create_many(rows)
        assert created[0].id is not None
        found = repo.search(100000, "norway", "Master")
    assert [u.name for u in found] == ["University of Oslo"]
