"""Loan application schemas.

Field names are snake_case in Python and camelCase on the wire
(``borrower_name`` -> ``borrowerName``).
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApplicationStatus(StrEnum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Decision(StrEnum):
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class LoanApplication(CamelModel):
    """A single high-risk loan application."""

    id: str
    borrower_name: str
    amount: int
    risk_score: int
    status: ApplicationStatus
    submitted_at: datetime


class ApplicationListResponse(CamelModel):
    """Every application in the store."""

    message: str
    count: int
    data: list[LoanApplication]


class ApplicationResponse(CamelModel):
    message: str
    data: LoanApplication


class DecisionResponse(CamelModel):
    """Outcome of a simulated approve/reject action."""

    message: str
    action: Decision
    application_id: str
