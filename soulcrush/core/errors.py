"""
Domain errors raised by the tracker store.

Routes translate these into HTTP responses; everything else propagates.
"""


class TrackerError(Exception):
    """Base class for tracker store errors."""


class NotFound(TrackerError):
    """A company or application id does not exist."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")


class ForeignKeyViolation(TrackerError):
    """An application references a company that does not exist."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"Company {company_id} does not exist")


class InvalidStatus(TrackerError):
    """A status label is not one of the known application statuses."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid status: {value}")
