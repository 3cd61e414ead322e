"""CLI script to load a university catalog CSV into the configured database.
Usage: python scripts/seed_universities.py [--create-tables] universities.csv

The CSV needs a header row with the columns
name,country,tuition,degree_level,min_gpa,min_ielts
"""
import sys
import argparse
import csv
import io
import pathlib
from typing import List, Tuple
# Ensure `backend/` is on sys.path so `portal` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from portal import models, repositories
from portal.config import settings
from portal.database import build_engine, create_db_and_tables

REQUIRED_COLUMNS = ("name", "country", "tuition", "degree_level", "min_gpa", "min_ielts")


def parse_catalog(text: str) -> Tuple[List[models.University], List[dict]]:
    """Parse CSV text into `University` rows plus per-line errors.

    Rows with a missing name or a non-numeric fee/threshold are reported
    in `errors` and skipped.
    """
    reader = csv.DictReader(io.StringIO(text))
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise ValueError(f"missing columns: {', '.join(missing)}")
    rows = []
    errors = []
    for line_no, rec in enumerate(reader, start=2):
        name = (rec.get("name") or "").strip()
        if not name:
            errors.append({"line": line_no, "error": "missing name"})
            continue
        try:
            rows.append(models.University(
                name=name,
                country=(rec.get("country") or "").strip(),
                tuition=float(rec["tuition"]),
                degree_level=(rec.get("degree_level") or "").strip(),
                min_gpa=float(rec["min_gpa"]),
                min_ielts=float(rec["min_ielts"]),
            ))
        except (TypeError, ValueError) as e:
            errors.append({"line": line_no, "error": str(e)})
    return rows, errors


def main(path: pathlib.Path, create_tables: bool = False):
    """Insert every valid row of `path` and print a summary."""
    rows, errors = parse_catalog(path.read_text(encoding="utf-8"))
    for err in errors:
        print(f"Skipping line {err['line']}: {err['error']}")
    engine = build_engine(settings)
    if create_tables:
        create_db_and_tables(engine)
    with Session(engine) as session:
        created = repositories.UniversityRepository(session).create_many(rows)
    print(f"Inserted {len(created)} universities, skipped {len(errors)}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('csv_path', type=pathlib.Path, help='CSV file with the university catalog')
    parser.add_argument('--create-tables', action='store_true', help='Create tables first (local SQLite databases only)')
    args = parser.parse_args()
    main(args.csv_path, create_tables=args.create_tables)
