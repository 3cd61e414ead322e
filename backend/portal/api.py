"""HTTP controllers for the catalog and application endpoints.

Controllers are intentionally thin: they accept requests, delegate to
services, and translate domain exceptions and store failures into JSON
responses. Raw database error text is logged, never returned.

Endpoints implemented:
- GET /api/universities
- POST /api/apply
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from . import services
from .database import get_session
from .schemas import ApplicationIn, ApplicationOut, UniversityOut

logger = logging.getLogger("portal.api")

router = APIRouter(prefix="/api", tags=["portal"])


@router.get("/universities", response_model=List[UniversityOut])
def list_universities(
    request: Request,
    maxFee: Optional[str] = None,
    country: Optional[str] = None,
    degree: Optional[str] = None,
    db: Session = Depends(get_session),
):
    """List universities filtered by fee ceiling, country and degree level.

    All filters are optional. `maxFee` is compared with `<=` and falls
    back to the configured ceiling when missing or non-numeric; `country`
    is a case-insensitive substring; `degree` must match exactly. Results
    are ordered by name.
    """
    svc = services.CatalogService(db, default_max_fee=request.app.state.settings.DEFAULT_MAX_FEE)
    try:
        return svc.search(maxFee, country, degree)
    except SQLAlchemyError:
        logger.exception("catalog query failed")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@router.post("/apply", status_code=201, response_model=ApplicationOut)
def apply(payload: ApplicationIn, db: Session = Depends(get_session)):
    """Submit an application after checking the university's minimum scores.

    Responds 404 when the university does not exist, 403 when GPA or IELTS
    is below the minimum, 400 when the store rejects a score as out of
    range and 500 on any other database error.
    """
    svc = services.ApplicationService(db)
    try:
        created = svc.submit(payload.studentName, payload.email, payload.universityId, payload.gpa, payload.ielts)
    except services.UniversityNotFound:
        return JSONResponse(status_code=404, content={"message": "University not found"})
    except services.RequirementsNotMet as e:
        return JSONResponse(status_code=403, content={"message": str(e)})
    except services.ScoreOutOfRange as e:
        logger.warning("application rejected by store: %s", e.__cause__)
        return JSONResponse(status_code=400, content={"message": str(e)})
    except SQLAlchemyError:
        logger.exception("application submission failed")
        return JSONResponse(status_code=500, content={"message": "Database error during submission."})
    return {"message": "Application submitted successfully!", "applicationId": created.id}
