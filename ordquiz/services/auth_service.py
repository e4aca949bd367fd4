"""Identity tokens issued by the sign-in provider."""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from ordquiz.config import AUTH_ALGORITHM, AUTH_SECRET
from ordquiz.models.auth import Identity


def create_identity_token(
    subject: str,
    name: str | None = None,
    email: str | None = None,
    image: str | None = None,
    expires_minutes: int = 60,
) -> str:
    """Create a signed identity token (used by the provider bridge and tests)."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode = {
        "sub": subject,
        "name": name,
        "email": email,
        "picture": image,
        "exp": expire,
    }
    return jwt.encode(to_encode, AUTH_SECRET, algorithm=AUTH_ALGORITHM)


def verify_token(token: str) -> dict | None:
    """Verify and decode a token.

    Returns:
        Decoded token payload or None if invalid.
    """
    try:
        payload = jwt.decode(token, AUTH_SECRET, algorithms=[AUTH_ALGORITHM])
        return payload
    except JWTError:
        return None


def identity_from_payload(payload: dict) -> Identity | None:
    """Map provider claims onto the session profile."""
    subject = payload.get("sub") or payload.get("email")
    if not subject:
        return None
    return Identity(
        subject=str(subject),
        name=payload.get("name"),
        email=payload.get("email"),
        image=payload.get("picture") or payload.get("image"),
    )
