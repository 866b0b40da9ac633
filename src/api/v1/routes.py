"""
API v1 routes.

Defines REST endpoints for the customer registration API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_registration_service
from src.api.models import (
    ErrorResponse,
    FailureModel,
    RegisterRequest,
    RegisterResponse,
    RejectionResponse,
)
from src.domain.exceptions import RegistrationRejected, UsernameAlreadyTaken
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Username claimed concurrently"},
        422: {"model": RejectionResponse, "description": "Business rule or validation error"},
    },
    summary="Register a new customer",
    description="Submit a username, password, password confirmation and address. "
    "The submission is checked against the registration rules before the account is created.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """
    Register a new customer account.

    - **name**: Desired username (must not be taken)
    - **password**: At least 8 letters and digits, with lowercase, uppercase and digit
    - **password_confirmation**: Must equal password
    - **address**: Shipping/contact address

    Returns the registered username on success.
    """
    try:
        name = service.register(request_data.to_submission())
    except RegistrationRejected as exc:
        raise HTTPException(
            status_code=422,
            detail=[
                FailureModel.from_failure(failure).model_dump(mode="json")
                for failure in exc.failures
            ],
        ) from None
    except UsernameAlreadyTaken:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Registration failed",
        ) from None
    return RegisterResponse(message="Customer registered", name=name)
