from datetime import datetime, timedelta, timezone
import jwt

from core.auth_utils import create_access_token, decode_access_token, authorize_token
from core.config import SECRET_KEY, ALGORITHM

def test_create_and_decode_token():
    token = create_access_token({"email": "alice@example.com"})
    payload = decode_access_token(token)
    assert isinstance(payload, dict)
    assert payload["email"] == "alice@example.com"
    assert "exp" in payload

def test_decode_expired_token():
    expired = jwt.encode(
        {"email": "alice@example.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        SECRET_KEY,
        algorithm=ALGORITHM,
    )
    assert decode_access_token(expired) == "Expired"

def test_decode_garbage_token():
    assert decode_access_token("not-a-jwt") == "Invalid"

def test_decode_token_signed_with_other_key():
    forged = jwt.encode({"email": "alice@example.com"}, "some-other-secret-key-of-sufficient-size", algorithm=ALGORITHM)
    assert decode_access_token(forged) == "Invalid"

def test_authorize_bearer_header():
    token = create_access_token({"email": "bob@example.com"})
    is_valid, payload = authorize_token(f"Bearer {token}")
    assert is_valid
    assert payload["email"] == "bob@example.com"

def test_authorize_scheme_is_case_insensitive():
    token = create_access_token({"email": "bob@example.com"})
    is_valid, _ = authorize_token(f"bearer {token}")
    assert is_valid

def test_authorize_raw_token():
    token = create_access_token({"email": "bob@example.com"})
    is_valid, payload = authorize_token(token)
    assert is_valid
    assert payload["email"] == "bob@example.com"

def test_authorize_rejects_bad_token():
    assert authorize_token("Bearer nope") == (False, None)

def test_authorize_rejects_empty_bearer():
    assert authorize_token("Bearer ") == (False, None)

def test_authorize_requires_email_claim():
    token = create_access_token({"user_uuid": "1234"})
    assert authorize_token(f"Bearer {token}") == (False, None)

def test_authorize_rejects_non_string_email():
    token = create_access_token({"email": 42})
    assert authorize_token(f"Bearer {token}") == (False, None)
