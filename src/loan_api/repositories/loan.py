"""Loan application data-access layer.

Pure lookup functions over a read-only in-memory store. No business logic,
no HTTP concerns. Each function takes the store and returns models.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType

from loan_api.schemas.loan import ApplicationStatus, LoanApplication

ApplicationStore = Mapping[str, LoanApplication]


def build_store(applications: list[LoanApplication]) -> ApplicationStore:
    """Index applications by id behind a read-only view."""
    return MappingProxyType({application.id: application for application in applications})


SEED_APPLICATIONS: ApplicationStore = build_store(
    [
        LoanApplication(
            id="LA9001",
            borrower_name="Alice Johnson",
            amount=150000,
            risk_score=85,
            status=ApplicationStatus.PENDING,
            submitted_at=datetime(2024, 10, 25, 10, 0, tzinfo=UTC),
        ),
        LoanApplication(
            id="LA9002",
            borrower_name="Bob Smith",
            amount=50000,
            risk_score=78,
            status=ApplicationStatus.PENDING,
            submitted_at=datetime(2024, 10, 25, 11, 30, tzinfo=UTC),
        ),
        LoanApplication(
            id="LA9003",
            borrower_name="Charlie Brown",
            amount=400000,
            risk_score=92,
            status=ApplicationStatus.PENDING,
            submitted_at=datetime(2024, 10, 26, 9, 15, tzinfo=UTC),
        ),
        LoanApplication(
            id="LA9004",
            borrower_name="Dana Whitfield",
            amount=275000,
            risk_score=88,
            status=ApplicationStatus.APPROVED,
            submitted_at=datetime(2024, 10, 27, 14, 45, tzinfo=UTC),
        ),
    ]
)


def get_store() -> ApplicationStore:
    """FastAPI dependency returning the application store.

    Tests override this via ``app.dependency_overrides[get_store]``.
    """
    return SEED_APPLICATIONS


def list_applications(store: ApplicationStore) -> list[LoanApplication]:
    """Return every application ordered by id."""
    return [store[key] for key in sorted(store)]


def find_application(store: ApplicationStore, application_id: str) -> LoanApplication | None:
    return store.get(application_id)
