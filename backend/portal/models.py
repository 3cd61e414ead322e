"""SQLModel data models.

This module maps the two tables the service works with. The schema is
owned by the database; the column types below mirror it so that queries
and inserts line up with the deployed tables.
"""

from typing import Optional

from sqlalchemy import Column, Numeric
from sqlmodel import SQLModel, Field


class University(SQLModel, table=True):
    """A university in the catalog.

    Rows are loaded by an external process and only read by the API.
    `min_gpa` and `min_ielts` are the admission thresholds checked on
    every application.
    """
    __tablename__ = "universities"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    country: str
    tuition: float = Field(sa_column=Column(Numeric(12, 2, asdecimal=False), nullable=False))
    degree_level: str
    min_gpa: float = Field(sa_column=Column(Numeric(3, 2, asdecimal=False), nullable=False))
    min_ielts: float = Field(sa_column=Column(Numeric(3, 1, asdecimal=False), nullable=False))


class Application(SQLModel, table=True):
    """A submitted student application (append-only)."""
    __tablename__ = "applications"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_name: str
    student_email: str
    university_id: int = Field(foreign_key="universities.id")
    gpa_submitted: float = Field(sa_column=Column(Numeric(3, 2, asdecimal=False), nullable=False))
    ielts_submitted: float = Field(sa_column=Column(Numeric(3, 2, asdecimal=False), nullable=False))
