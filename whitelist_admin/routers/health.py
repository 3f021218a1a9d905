import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from whitelist_admin.core.database import ping_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready")
def readiness_check() -> JSONResponse:
    try:
        ping_db()
    except SQLAlchemyError:
        logger.exception("Readiness check failed")
        return JSONResponse(
            {"status": "not_ready", "detail": "Database unreachable"},
            status_code=503,
        )
    return JSONResponse({"status": "ready"})
