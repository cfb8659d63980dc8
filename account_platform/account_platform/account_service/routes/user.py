"""
User profile routes.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_user_directory
from ..errors import UserNotFound
from ..guard import AuthenticatedIdentity, require_user
from ..schemas import UserResponse
from ..users import UserDirectory

router = APIRouter(prefix="/user", tags=["user"])
logger = logging.getLogger(__name__)


@router.get("/id/{user_id}", response_model=UserResponse, responses={404: {"description": "User not found"}})
def get_user(user_id: str, users: UserDirectory = Depends(get_user_directory)):
    user = users.find_by_id(user_id)
    if user is None:
        logger.info("User lookup miss: user_id=%s", user_id)
        return JSONResponse(status_code=404, content={"error": UserNotFound.message})
    return user.to_dict()


@router.get("/current", response_model=UserResponse)
def get_current_user(identity: AuthenticatedIdentity = Depends(require_user)):
    """Same identity the access guard attached to the request."""
    return identity.to_dict()
