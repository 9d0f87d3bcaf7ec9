import jwt
from datetime import datetime, timedelta, timezone
from core.config import SECRET_KEY, ALGORITHM, EXPIRE_MINUTES
from core.logging_config import get_logger

logger = get_logger(__name__)

BEARER_PREFIX = "bearer "

def create_access_token(data: dict):
    """Build a signed JWT carrying the user's claims"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=EXPIRE_MINUTES)
    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str):
    """Decode a token and return its claims"""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return payload  # {"email": "...", "exp": ...}
    except jwt.ExpiredSignatureError:
        return "Expired"
    except jwt.InvalidTokenError:
        return "Invalid"

def authorize_token(authorization_header: str):
    """
    Validate an Authorization header value.

    Accepts either a raw token or one prefixed with the Bearer scheme.
    Returns (is_valid, payload); payload is None whenever is_valid is False.
    """
    token = authorization_header.strip()
    if token.lower().startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    if not token:
        return False, None

    payload = decode_access_token(token)
    if not isinstance(payload, dict):
        logger.info(f"Rejected token: {payload}")
        return False, None

    email = payload.get("email")
    if not isinstance(email, str) or not email:
        logger.info("Rejected token: no email claim")
        return False, None

    return True, payload
