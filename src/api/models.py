"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.validation import FailureCode, RegistrationSubmission, ValidationFailure


class RegisterRequest(BaseModel):
    """Request model for customer registration."""

    name: str = Field(..., min_length=1, description="Desired username")
    password: str = Field(..., min_length=1, description="Account password")
    password_confirmation: str = Field(
        ..., min_length=1, description="Repeated password for confirmation"
    )
    address: str = Field(..., min_length=1, description="Shipping/contact address")

    def to_submission(self) -> RegistrationSubmission:
        """Convert the request body into a domain submission."""
        return RegistrationSubmission(
            name=self.name,
            password=self.password,
            password_confirmation=self.password_confirmation,
            address=self.address,
        )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    name: str


class FailureModel(BaseModel):
    """One business rule failure."""

    field: str
    code: FailureCode
    message: str

    @classmethod
    def from_failure(cls, failure: ValidationFailure) -> "FailureModel":
        return cls(field=failure.field, code=failure.code, message=failure.message)


class RejectionResponse(BaseModel):
    """Response model for a submission rejected by business rules."""

    detail: list[FailureModel]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
