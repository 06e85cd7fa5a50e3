from typing import Dict, Optional

from fastapi import Request
from jose import jwt
from jose.exceptions import JOSEError


def extract_user_identity(request: Optional[Request], payload: Dict) -> str:
    """
    Extract user identity from:
    1. Authenticated-user proxy header
    2. JWT token
    3. Payload
    4. Fallback to anonymous
    """
    headers = request.headers if request is not None else {}

    user_email = headers.get("X-Goog-Authenticated-User-Email")
    if user_email:
        return user_email.split(":")[-1]

    # JWT fallback
    auth_header = headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1]
        try:
            decoded = jwt.get_unverified_claims(token)
            return decoded.get("email") or decoded.get("sub") or "unknown_user"
        except JOSEError:
            pass

    # Payload fallback
    if payload.get("user_id"):
        return payload["user_id"]

    return "anonymous"
