"""Loan application business logic.

Looks records up through the repository and raises taxonomy errors for
missing or already-decided applications. Approve/reject are simulated:
the decision is reported back but never written to the store.
"""

from dataclasses import dataclass

from loan_api.exceptions import ConflictError, NotFoundError
from loan_api.repositories.loan import ApplicationStore, find_application, list_applications
from loan_api.schemas.loan import ApplicationStatus, Decision, LoanApplication


@dataclass(frozen=True)
class DecisionOutcome:
    """Result of a simulated approve/reject action."""

    application: LoanApplication
    decision: Decision


def get_applications(store: ApplicationStore) -> list[LoanApplication]:
    return list_applications(store)


def get_application(store: ApplicationStore, application_id: str) -> LoanApplication:
    """Return the application or raise NotFoundError."""
    application = find_application(store, application_id)
    if application is None:
        raise NotFoundError(f"Application ID {application_id} not found.")
    return application


def decide_application(
    store: ApplicationStore, application_id: str, decision: Decision
) -> DecisionOutcome:
    """Validate that the application can still be decided.

    Raises:
        NotFoundError: no application with that id.
        ConflictError: the application is no longer pending.
    """
    application = get_application(store, application_id)
    if application.status is not ApplicationStatus.PENDING:
        raise ConflictError(
            f"Application ID {application_id} has already been "
            f"{application.status.value.lower()}."
        )
    return DecisionOutcome(application=application, decision=decision)
