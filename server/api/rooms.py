from fastapi import APIRouter, Header, HTTPException, status
from fastapi.responses import PlainTextResponse
from core.auth_utils import authorize_token
from core.database import get_user_by_email, get_user_with_room, is_hosting, create_room_for_host
from core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/room", tags=["room"])

NOT_IMPLEMENTED = "Method has not been implemented"

def authorize(authorization: str | None):
    """Validate the Authorization header and return the token payload."""
    if not authorization:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No authorization provided")

    is_valid, payload = authorize_token(authorization)
    if not is_valid or not payload:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return payload

@router.get("")
async def get_room(authorization: str | None = Header(None)):
    """
    Return the id of the room the caller belongs to.
    """
    payload = authorize(authorization)

    user = await get_user_with_room(payload["email"])
    if not user:
        logger.info(f"GET room: no user for {payload['email']}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User does not exist")

    if not user["room_id"]:
        logger.info(f"GET room: {payload['email']} is not in a room")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User is not in room")

    return {"room_id": str(user["room_id"])}

@router.put("", status_code=status.HTTP_201_CREATED)
async def create_room(authorization: str | None = Header(None)):
    """
    Create a room hosted by the caller and move the caller into it.
    """
    payload = authorize(authorization)

    user = await get_user_by_email(payload["email"])
    if not user:
        logger.info(f"PUT room: no user for {payload['email']}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User does not exist")

    if await is_hosting(user["user_uuid"]):
        logger.info(f"PUT room: {payload['email']} is already hosting")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User is already hosting")

    room_id = await create_room_for_host(user["user_uuid"])
    if room_id is None:
        # lost a race against another create for the same host
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User is already hosting")

    return {"room_id": room_id}

@router.api_route("", methods=["POST", "DELETE", "HEAD", "UPDATE", "OPTIONS", "TRACE"], include_in_schema=False)
async def not_implemented():
    return PlainTextResponse(NOT_IMPLEMENTED, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
