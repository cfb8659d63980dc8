from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from typing import Annotated, Literal, Optional


def check_email(value: str) -> str:
    # validate only; the address is stored exactly as typed
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


Email = Annotated[str, AfterValidator(check_email)]


class LoginRequest(BaseModel):
    email: Email
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    email: Email
    password: str = Field(..., min_length=8)
    name: Optional[str] = None


class LoginResponse(BaseModel):
    token: Optional[str] = None
    error: Optional[str] = None


class RegisterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: Optional[str] = None
    email_verification_needed: Optional[bool] = Field(default=None, alias="emailVerificationNeeded")
    error: Optional[str] = None


class VerifyEmailResponse(BaseModel):
    success: bool
    error: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    role: str


class HealthResponse(BaseModel):
    message: str
    status: Literal["ok", "error"]
    timestamp: int
