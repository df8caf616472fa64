"""Loan application endpoints, mounted under /api/v1/loans."""

from fastapi import APIRouter

from loan_api.dependencies import Store
from loan_api.schemas.error import ErrorResponse
from loan_api.schemas.loan import (
    ApplicationListResponse,
    ApplicationResponse,
    Decision,
    DecisionResponse,
)
from loan_api.services.loan import decide_application, get_application, get_applications

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_DECISION_ERRORS = {404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}


@router.get("", response_model=ApplicationListResponse, status_code=200)
async def list_applications(store: Store) -> ApplicationListResponse:
    """List every high-risk loan application."""
    applications = get_applications(store)
    return ApplicationListResponse(
        message="Successfully retrieved all high-risk loan applications.",
        count=len(applications),
        data=applications,
    )


@router.get(
    "/{application_id}",
    response_model=ApplicationResponse,
    status_code=200,
    responses=_NOT_FOUND,
)
async def read_application(application_id: str, store: Store) -> ApplicationResponse:
    application = get_application(store, application_id)
    return ApplicationResponse(
        message=f"Successfully retrieved application {application_id}.",
        data=application,
    )


@router.post(
    "/approve/{application_id}",
    response_model=DecisionResponse,
    status_code=200,
    responses=_DECISION_ERRORS,
)
async def approve_application(application_id: str, store: Store) -> DecisionResponse:
    """Approve a pending application (simulated; the store is not updated)."""
    outcome = decide_application(store, application_id, Decision.APPROVED)
    return DecisionResponse(
        message=f"Application {application_id} approved successfully. "
        "(Action simulated - status not permanently updated)",
        action=outcome.decision,
        application_id=outcome.application.id,
    )


@router.post(
    "/reject/{application_id}",
    response_model=DecisionResponse,
    status_code=200,
    responses=_DECISION_ERRORS,
)
async def reject_application(application_id: str, store: Store) -> DecisionResponse:
    """Reject a pending application (simulated; the store is not updated)."""
    outcome = decide_application(store, application_id, Decision.REJECTED)
    return DecisionResponse(
        message=f"Application {application_id} rejected successfully. "
        "(Action simulated - status not permanently updated)",
        action=outcome.decision,
        application_id=outcome.application.id,
    )
