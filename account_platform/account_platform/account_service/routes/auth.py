"""
Auth routes: login, register, email verification and current identity.

Business failures come back as HTTP 200 with an `error` field; only request
validation failures (400) and guard rejections (401) change the status code.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ..config import Settings, get_settings
from ..dependencies import get_auth_workflow
from ..errors import DomainError
from ..guard import AuthenticatedIdentity, require_user
from ..schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
    VerifyEmailResponse,
)
from ..workflow import AuthWorkflow

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def error_message(error: Exception, default: str) -> str:
    """Message safe to hand back to the caller; unexpected errors are logged in full."""
    if isinstance(error, DomainError):
        logger.info("%s: %s", default, error)
        return str(error)
    logger.exception("Unexpected error: %s", default)
    return default


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
def login(payload: LoginRequest, workflow: AuthWorkflow = Depends(get_auth_workflow)):
    try:
        token = workflow.login(payload.email, payload.password)
    except Exception as e:
        return {"error": error_message(e, "Authentication failed")}
    return {"token": token}


@router.post("/register", response_model=RegisterResponse, response_model_exclude_none=True)
def register(payload: RegisterRequest, workflow: AuthWorkflow = Depends(get_auth_workflow)):
    try:
        result = workflow.register(payload.email, payload.password, payload.name)
    except Exception as e:
        return {"error": error_message(e, "Registration failed")}
    return {
        "token": result.token,
        "emailVerificationNeeded": result.email_verification_needed,
    }


@router.get("/verify-email", response_model=VerifyEmailResponse, response_model_exclude_none=True)
def verify_email(
    token: Optional[str] = None,
    workflow: AuthWorkflow = Depends(get_auth_workflow),
    settings: Settings = Depends(get_settings),
):
    if not token:
        return {"success": False, "error": "Token is required"}

    try:
        success = workflow.verify_email(token)
    except Exception as e:
        return {"success": False, "error": error_message(e, "Email verification failed")}

    if success and settings.FRONTEND_URL:
        return RedirectResponse(
            url=f"{settings.FRONTEND_URL.rstrip('/')}/?verify-email-success=true",
            status_code=302,
        )
    return {"success": success}


@router.get("/current", response_model=UserResponse)
def current_user(identity: AuthenticatedIdentity = Depends(require_user)):
    return identity.to_dict()
