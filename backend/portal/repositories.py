"""Repository classes encapsulating database operations.

Each repository is small and focused on a single table. Repositories
return SQLModel objects and perform commits/refreshes where appropriate;
database errors propagate to the caller unchanged.
"""

from typing import Iterable, List, Optional

from sqlmodel import Session, select
from sqlalchemy import func

from . import models


class UniversityRepository:
    """Read access to the `universities` catalog."""
    def __init__(self, session: Session):
        self.session = session

    def search(self, max_fee: float, country: str = "", degree: str = "") -> List[models.University]:
        """Return universities matching the catalog filters, ordered by name.

        `country` is matched as a case-insensitive substring; an empty
        `degree` disables the degree filter.
        """
        stmt = select(models.University).where(
            models.University.tuition <= max_fee,
            models.University.country.ilike(f"%{country}%"),
        )
        if degree:
            stmt = stmt.where(models.University.degree_level == degree)
        stmt = stmt.order_by(models.University.name.asc())
        return self.session.exec(stmt).all()

    def get(self, university_id: int) -> Optional[models.University]:
        """Get a `University` by primary key."""
        return self.session.get(models.University, university_id)

    def create_many(self, universities: Iterable[models.University]) -> List[models.University]:
        """Insert catalog rows in a single commit (used by the seeding script)."""
        rows = list(universities)
        self.session.add_all(rows)
        self.session.commit()
        for u in rows:
            self.session.refresh(u)
        return rows


class ApplicationRepository:
    """Append-only persistence for `Application` rows."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, application: models.Application) -> models.Application:
        """Persist a new application and return it with its generated id."""
        self.session.add(application)
        self.session.commit()
        self.session.refresh(application)
        return application

    def count(self) -> int:
        """Return the number of stored applications."""
        stmt = select(func.count()).select_from(models.Application)
        return self.session.exec(stmt).one()
