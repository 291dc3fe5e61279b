"""
Application model and the trigger that removes a company when one of its
applications is deleted.
"""
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Text, ForeignKey, DDL, event
from sqlalchemy.orm import relationship

from soulcrush.core.errors import InvalidStatus
from soulcrush.db.base import Base

TRIGGER_NAME = "delete_company_after_application"


class ApplicationStatus(str, enum.Enum):
    """Known status labels, stored by name. Order is the cycling order."""
    TODO = "ToDo"
    SOLICITATED = "Solicitated"
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

    @classmethod
    def parse(cls, value: str) -> "ApplicationStatus":
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatus(value) from None

    @property
    def label(self) -> str:
        return "To Do" if self is ApplicationStatus.TODO else self.value

    def next(self) -> "ApplicationStatus":
        members = list(ApplicationStatus)
        return members[(members.index(self) + 1) % len(members)]


class Application(Base):
    """One job application sent to a company."""
    __tablename__ = "applications"

    id = Column(Text, primary_key=True)
    company_id = Column(
        Text,
        ForeignKey("companies.id", ondelete="CASCADE", name="fk_application_company"),
        nullable=False,
    )
    status = Column(Text, nullable=False)
    date = Column(Text, nullable=False)

    company = relationship("Company", back_populates="applications")

    @property
    def label(self) -> str:
        """Display text for the status; free-form labels are shown as stored."""
        try:
            return ApplicationStatus(self.status).label
        except ValueError:
            return self.status

    @staticmethod
    def now_date(moment: datetime = None) -> str:
        """Timestamp stored in `date` for applications tracked right now (UTC)."""
        if moment is None:
            moment = datetime.now(timezone.utc)
        return moment.isoformat()


# Child deletes parent: deleting an application deletes its company.
SQLITE_TRIGGER = DDL(
    f"""
    CREATE TRIGGER {TRIGGER_NAME}
    AFTER DELETE ON applications
    BEGIN
        DELETE FROM companies WHERE id = OLD.company_id;
    END
    """
)

POSTGRES_TRIGGER_FUNCTION = DDL(
    f"""
    CREATE OR REPLACE FUNCTION {TRIGGER_NAME}() RETURNS trigger AS $$
    BEGIN
        DELETE FROM companies WHERE id = OLD.company_id;
        RETURN OLD;
    END;
    $$ LANGUAGE plpgsql
    """
)

POSTGRES_TRIGGER = DDL(
    f"""
    CREATE TRIGGER {TRIGGER_NAME}
    AFTER DELETE ON applications
    FOR EACH ROW EXECUTE FUNCTION {TRIGGER_NAME}()
    """
)

POSTGRES_DROP_TRIGGER_FUNCTION = DDL(f"DROP FUNCTION IF EXISTS {TRIGGER_NAME}()")

event.listen(Application.__table__, "after_create", SQLITE_TRIGGER.execute_if(dialect="sqlite"))
event.listen(
    Application.__table__,
    "after_create",
    POSTGRES_TRIGGER_FUNCTION.execute_if(dialect="postgresql"),
)
event.listen(Application.__table__, "after_create", POSTGRES_TRIGGER.execute_if(dialect="postgresql"))
event.listen(
    Application.__table__,
    "after_drop",
    POSTGRES_DROP_TRIGGER_FUNCTION.execute_if(dialect="postgresql"),
)
