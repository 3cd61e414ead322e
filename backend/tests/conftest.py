import os

# Keep the module-level app in portal.main off any real database.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from portal import models, repositories
from portal.database import create_db_and_tables
from portal.main import create_app

CATALOG = [
    # id 1
    dict(name="University of Toronto", country="Canada", tuition=45000, degree_level="Bachelor", min_gpa=3.0, min_ielts=6.5),
    dict(name="Imperial College London", country="United Kingdom", tuition=38000, degree_level="Master", min_gpa=3.5, min_ielts=7.0),
    dict(name="ETH Zurich", country="Switzerland", tuition=1500, degree_level="Master", min_gpa=3.3, min_ielts=7.0),
    dict(name="Harvard University", country="United States", tuition=120000, degree_level="Bachelor", min_gpa=3.8, min_ielts=7.5),
    dict(name="University of Melbourne", country="Australia", tuition=42000, degree_level="Bachelor", min_gpa=3.0, min_ielts=6.5),
    dict(name="Technical University of Munich", country="Germany", tuition=0, degree_level="Master", min_gpa=2.8, min_ielts=6.5),
]


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite store seeded with the test catalog."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_db_and_tables(engine)
    with Session(engine) as session:
        session.add_all([models.University(**row) for row in CATALOG])
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture()
def client(engine):
    return TestClient(create_app(engine=engine))


@pytest.fixture()
def application_count(engine):
    def _count():
        with Session(engine) as session:
            return repositories.ApplicationRepository(session).count()
    return _count
