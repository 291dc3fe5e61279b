"""
Tracker store for companies and the applications sent to them.

Every function takes the caller's session. Writes commit on success and roll
back before raising, including for a failed lookup. Deleting an application
removes its company in the same statement (database trigger); the company's
other applications go with it through the cascading foreign key.
"""
import logging
import uuid
from typing import List, Optional
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from soulcrush.core.errors import ForeignKeyViolation, NotFound, TrackerError
from soulcrush.db.models.application import Application, ApplicationStatus
from soulcrush.db.models.company import Company

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Globally unique, store-independent record id."""
    return str(uuid.uuid4())


def _get_company_or_none(db: Session, company_id: str) -> Optional[Company]:
    return db.query(Company).filter(Company.id == company_id).first()


def create_company(db: Session, name: str, website: str, ceo: str, industry: str) -> str:
    """
    Persist a new company.

    Returns:
        The new company id
    """
    company = Company(id=new_id(), name=name, website=website, ceo=ceo, industry=industry)
    try:
        db.add(company)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Company created: company_id={company.id}, name={name}")
    return company.id


def create_application(db: Session, company_id: str, status: str, date: str) -> str:
    """
    Persist a new application for an existing company.

    Raises:
        ForeignKeyViolation: company_id does not reference an existing company
    """
    if _get_company_or_none(db, company_id) is None:
        db.rollback()
        raise ForeignKeyViolation(company_id)

    application = Application(id=new_id(), company_id=company_id, status=status, date=date)
    try:
        db.add(application)
        db.commit()
    except IntegrityError as e:
        # Company removed between the check and the insert
        db.rollback()
        logger.warning(f"Application insert rejected: company_id={company_id}: {e.orig}")
        raise ForeignKeyViolation(company_id) from e
    except Exception:
        db.rollback()
        raise

    logger.info(f"Application created: application_id={application.id}, company_id={company_id}")
    return application.id


def track_application(
    db: Session,
    name: str,
    website: str,
    ceo: str,
    industry: str,
    status: ApplicationStatus = ApplicationStatus.TODO,
) -> Application:
    """
    Create a company and its first application in a single transaction.

    The application is dated now (UTC).
    """
    company = Company(id=new_id(), name=name, website=website, ceo=ceo, industry=industry)
    application = Application(
        id=new_id(),
        company_id=company.id,
        status=ApplicationStatus.parse(status).value,
        date=Application.now_date(),
    )
    try:
        db.add(company)
        # Company row must exist before the application references it
        db.flush()
        db.add(application)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(application)
    logger.info(
        f"Application tracked: application_id={application.id}, company_id={company.id}, company={name}"
    )
    return application


def get_company(db: Session, company_id: str) -> Company:
    company = _get_company_or_none(db, company_id)
    if company is None:
        raise NotFound("Company", company_id)
    return company


def get_application(db: Session, application_id: str) -> Application:
    application = (
        db.query(Application)
        .options(joinedload(Application.company))
        .filter(Application.id == application_id)
        .first()
    )
    if application is None:
        raise NotFound("Application", application_id)
    return application


def list_applications_for_company(db: Session, company_id: str) -> List[Application]:
    """Applications of one company, newest first."""
    get_company(db, company_id)
    return (
        db.query(Application)
        .filter(Application.company_id == company_id)
        .order_by(Application.date.desc())
        .all()
    )


def list_applications(db: Session) -> List[Application]:
    """Every application with its company loaded, newest first."""
    return (
        db.query(Application)
        .options(joinedload(Application.company))
        .order_by(Application.date.desc())
        .all()
    )


def advance_application_status(db: Session, application_id: str) -> Application:
    """
    Move an application to the next status in the cycle.

    Raises:
        NotFound: unknown application id
        InvalidStatus: the stored status is not a known label
    """
    try:
        application = get_application(db, application_id)
        current = ApplicationStatus.parse(application.status)
    except TrackerError:
        db.rollback()
        raise
    application.status = current.next().value
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(application)
    logger.info(
        f"Application status advanced: application_id={application_id}, "
        f"{current.value} -> {application.status}"
    )
    return application


def delete_application(db: Session, application_id: str) -> None:
    """
    Delete an application and, in the same statement, the company it references.

    Nothing is deleted if any part of the statement fails.

    Raises:
        NotFound: unknown application id
    """
    application = db.query(Application).filter(Application.id == application_id).first()
    if application is None:
        db.rollback()
        raise NotFound("Application", application_id)
    company_id = application.company_id

    logger.info(f"Deleting application: application_id={application_id}, company_id={company_id}")
    try:
        result = db.execute(delete(Application).where(Application.id == application_id))
        # Removed by another session since the lookup, e.g. a sibling's cascade
        if result.rowcount == 0:
            db.rollback()
            raise NotFound("Application", application_id)
        db.commit()
    except NotFound:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete application {application_id}: {e}", exc_info=True)
        raise

    db.expunge_all()


def delete_company(db: Session, company_id: str) -> None:
    """
    Delete a company together with all of its applications.

    Raises:
        NotFound: unknown company id
    """
    if _get_company_or_none(db, company_id) is None:
        db.rollback()
        raise NotFound("Company", company_id)

    logger.info(f"Deleting company: company_id={company_id}")
    try:
        result = db.execute(delete(Company).where(Company.id == company_id))
        if result.rowcount == 0:
            db.rollback()
            raise NotFound("Company", company_id)
        db.commit()
    except NotFound:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete company {company_id}: {e}", exc_info=True)
        raise

    db.expunge_all()
