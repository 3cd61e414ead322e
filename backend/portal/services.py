"""Business logic services used by HTTP controllers.

`CatalogService` turns raw query-string filters into a catalog search and
`ApplicationService` checks submitted scores against a university's
minimums before persisting the application. Services raise the domain
exceptions defined here; controllers translate them to HTTP responses.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List, Optional

from sqlalchemy.exc import DataError
from sqlmodel import Session

from . import models, repositories

logger = logging.getLogger("portal.services")

DEFAULT_MAX_FEE = 100000.0
NUMERIC_VALUE_OUT_OF_RANGE = "22003"


class UniversityNotFound(Exception):
    """The referenced university does not exist."""


class RequirementsNotMet(Exception):
    """Submitted scores are below the university's minimums."""


class ScoreOutOfRange(Exception):
    """The store rejected a score as too large for its column."""


def parse_score(value: Any) -> float:
    """Parse a submitted score, returning NaN for anything unparsable.

    NaN never compares as `>=` a threshold, so unparsable input is
    rejected by the requirement check rather than by a separate error.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(str(value).strip())
    except ValueError:
        return math.nan


def parse_max_fee(value: Optional[str], default: float = DEFAULT_MAX_FEE) -> float:
    """Return the fee ceiling for a catalog query, or `default` when unusable."""
    if value is None or not str(value).strip():
        return default
    try:
        fee = float(value)
    except ValueError:
        return default
    if math.isnan(fee):
        return default
    return fee


def round_score(value: float) -> float:
    """Round a score to two decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def is_numeric_overflow(exc: DataError) -> bool:
    """Return True when a `DataError` wraps SQLSTATE 22003.

    psycopg2 exposes the code as `pgcode`, psycopg 3 as `sqlstate`.
    """
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    return code == NUMERIC_VALUE_OUT_OF_RANGE


class CatalogService:
    """Filtered reads over the university catalog."""
    def __init__(self, session: Session, default_max_fee: float = DEFAULT_MAX_FEE):
        self.session = session
        self.default_max_fee = default_max_fee
        self.uni_repo = repositories.UniversityRepository(session)

    def search(self, max_fee: Optional[str] = None, country: Optional[str] = None, degree: Optional[str] = None) -> List[models.University]:
        """Search the catalog using raw query-string values.

        Missing or non-numeric `max_fee` falls back to the default ceiling;
        missing `country`/`degree` match everything.
        """
        fee = parse_max_fee(max_fee, self.default_max_fee)
        return self.uni_repo.search(fee, country or "", degree or "")


class ApplicationService:
    """Validate and persist student applications."""
    def __init__(self, session: Session):
        self.session = session
        self.uni_repo = repositories.UniversityRepository(session)
        self.app_repo = repositories.ApplicationRepository(session)

    def submit(self, student_name: str, email: str, university_id: Any, gpa: Any, ielts: Any) -> models.Application:
        """Check the scores against the university's minimums and store the application.

        Raises `UniversityNotFound` when the id does not resolve,
        `RequirementsNotMet` when either score is below its minimum (or
        unparsable), and `ScoreOutOfRange` when the store rejects a score
        as exceeding the column precision. Nothing is written unless all
        checks pass.
        """
        uni = self._get_university(university_id)
        num_gpa = parse_score(gpa)
        num_ielts = parse_score(ielts)
        if not (num_gpa >= uni.min_gpa and num_ielts >= uni.min_ielts):
            logger.info("application rejected for university %s (gpa=%r, ielts=%r)", uni.id, gpa, ielts)
            raise RequirementsNotMet(
                f"Rejected: Minimum requirement for {uni.name} is "
                f"GPA {uni.min_gpa:.2f} and IELTS {uni.min_ielts:.1f}."
            )
        application = models.Application(
            student_name=student_name,
            student_email=email,
            university_id=uni.id,
            gpa_submitted=round_score(num_gpa),
            ielts_submitted=round_score(num_ielts),
        )
        try:
            return self.app_repo.create(application)
        except DataError as e:
            if is_numeric_overflow(e):
                raise ScoreOutOfRange("GPA or IELTS value is out of range.") from e
            raise

    def _get_university(self, university_id: Any) -> models.University:
        try:
            uid = int(str(university_id).strip())
        except ValueError:
            raise UniversityNotFound(university_id)
        uni = self.uni_repo.get(uid)
        if not uni:
            raise UniversityNotFound(university_id)
        return uni
