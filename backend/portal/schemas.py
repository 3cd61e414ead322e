"""Pydantic request/response schemas used by the API.

Field names follow the JSON the frontend already sends and reads
(`studentName`, `applicationId`, ...), so no alias layer is needed.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class UniversityOut(BaseModel):
    """A catalog entry as returned by `GET /api/universities`."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    country: str
    tuition: float
    degree_level: str
    min_gpa: float
    min_ielts: float


class ApplicationIn(BaseModel):
    """Payload for `POST /api/apply`.

    Scores may arrive as strings or numbers; they are parsed by the
    service, which treats anything unparsable (booleans included) as
    failing the threshold. An unresolvable `universityId` is a 404, not a
    validation error.
    """
    studentName: str
    email: str
    universityId: Any = None
    gpa: Any = None
    ielts: Any = None


class ApplicationOut(BaseModel):
    """Response returned after a successful submission."""
    message: str
    applicationId: int
