"""
Health check endpoints
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.logging_config import LoggingConfig
from app.models.contact import Contact
from app.models.professional import Professional
from app.utils.datetime_utils import utc_now

logger = LoggingConfig.get_logger(__name__)
router = APIRouter(tags=["health"])


def registry_counts(db: Session) -> Dict[str, int]:
    """
    Record counts for the detailed health report

    Two counts expose contacts out of step with their professional, both
    repaired by ``cli.migrations reconcile``:

    - ``contacts_hidden_under_active``: flagged contacts whose professional
      is still active, what a soft delete that died mid-cascade leaves behind
    - ``contacts_pending_cascade``: active contacts whose professional is
      deleted (rows written before the cascade existed, or edited by hand)
    """
    active_professionals = db.query(func.count(Professional.id)).filter(Professional.deleted.is_(False)).scalar()
    deleted_professionals = db.query(func.count(Professional.id)).filter(Professional.deleted.is_(True)).scalar()
    active_contacts = (
        db.query(func.count(Contact.id))
        .filter(Contact.deleted_via_professional.is_(False))
        .scalar()
    )
    mismatched = db.query(func.count(Contact.id)).join(Professional, Professional.id == Contact.professional_id)
    hidden = mismatched.filter(
        Professional.deleted.is_(False), Contact.deleted_via_professional.is_(True)
    ).scalar()
    pending = mismatched.filter(
        Professional.deleted.is_(True), Contact.deleted_via_professional.is_(False)
    ).scalar()
    return {
        "active_professionals": active_professionals,
        "deleted_professionals": deleted_professionals,
        "active_contacts": active_contacts,
        "contacts_hidden_under_active": hidden,
        "contacts_pending_cascade": pending,
    }


@router.get("/health")
async def health_check():
    """Liveness probe"""
    return {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "service": get_settings().app_name
    }


@router.get("/health/detailed")
async def detailed_health_check(db: Session = Depends(get_db)):
    """
    Database connectivity plus registry consistency

    Returns:
        dict: Overall status and per-component details
    """
    settings = get_settings()
    report: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "service": settings.app_name,
        "environment": settings.app_env,
        "components": {},
    }

    try:
        db.execute(text("SELECT 1"))
        counts = registry_counts(db)
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        report["status"] = "unhealthy"
        report["components"]["database"] = {"status": "unhealthy", "error": type(e).__name__}
        return report

    report["components"]["database"] = {"status": "healthy"}
    out_of_step = counts["contacts_hidden_under_active"] + counts["contacts_pending_cascade"]
    report["components"]["registry"] = {
        "status": "degraded" if out_of_step else "healthy",
        **counts,
    }
    if out_of_step:
        report["status"] = "degraded"
    return report
