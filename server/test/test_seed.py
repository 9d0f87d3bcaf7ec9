import uuid
from unittest.mock import AsyncMock, patch

from core.auth_utils import authorize_token
from utils import seed

USER_UUID = uuid.UUID("11111111-2222-3333-4444-555555555555")

@patch("utils.seed.get_or_create_user", new_callable=AsyncMock, return_value=USER_UUID)
@patch("utils.seed.init_db", new_callable=AsyncMock)
def test_seed_prints_usable_token(init_db, get_or_create_user, capsys):
    seed.main(["carol@example.com", "--name", "Carol"])

    init_db.assert_awaited_once()
    get_or_create_user.assert_awaited_once_with("carol@example.com", "Carol")

    out = capsys.readouterr().out.strip()
    assert out.startswith("Authorization: Bearer ")
    is_valid, payload = authorize_token(out.split(": ", 1)[1])
    assert is_valid
    assert payload["email"] == "carol@example.com"
    assert payload["user_uuid"] == str(USER_UUID)
