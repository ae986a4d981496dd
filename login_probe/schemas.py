# login_probe/schemas.py
from pydantic import BaseModel
from typing import Any, Optional, Tuple

# Checked in this order; the first truthy one wins
TOKEN_FIELDS = (
    ("access_token", "Access token received!"),
    ("token", "Token received!"),
)

class LoginRequest(BaseModel):
    email: str
    password: str

def find_token(envelope: Any) -> Optional[Tuple[str, Any]]:
    """
    Look up the token in a login response body.
    Returns: (announcement, token) or None when no recognized field is set.
    """
    if not isinstance(envelope, dict):
        return None
    for field, announcement in TOKEN_FIELDS:
        value = envelope.get(field)
        if value:
            return announcement, value
    return None
