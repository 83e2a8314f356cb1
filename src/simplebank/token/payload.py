"""Token payload — the claim set carried inside every token.

Learn: The payload is built once at issuance and is read-only afterwards.
``expired_at`` is always derived from ``issued_at + duration`` so the two
can never disagree. Nothing here is persisted: the token *is* the session.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from simplebank.token.errors import TokenExpiredError, TokenMalformedError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Payload(BaseModel):
    """Claims identifying the caller a token was issued to."""

    id: uuid.UUID
    username: str
    issued_at: datetime
    expired_at: datetime

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls, username: str, duration: timedelta) -> "Payload":
        """Create a payload for ``username`` valid for ``duration``.

        Negative durations are allowed and produce an already-expired payload.
        The id comes from uuid4, which reads the OS CSPRNG.
        """
        now = utcnow()
        return cls(
            id=uuid.uuid4(),
            username=username,
            issued_at=now,
            expired_at=now + duration,
        )

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) <= self.expired_at

    def valid(self, now: Optional[datetime] = None) -> None:
        """Raise TokenExpiredError once the payload is past its expiry."""
        if not self.is_valid(now):
            raise TokenExpiredError("token has expired")

    def to_claims(self) -> dict[str, Any]:
        """JSON-safe claims dict."""
        return {
            "id": str(self.id),
            "username": self.username,
            "issued_at": self.issued_at.isoformat(),
            "expired_at": self.expired_at.isoformat(),
        }

    @classmethod
    def from_claims(cls, claims: Any) -> "Payload":
        if not isinstance(claims, dict):
            raise TokenMalformedError("token claims must be an object")
        try:
            payload = cls(
                id=claims["id"],
                username=claims["username"],
                issued_at=claims["issued_at"],
                expired_at=claims["expired_at"],
            )
        except (KeyError, ValidationError) as e:
            raise TokenMalformedError(f"invalid token claims: {e}") from e
        if payload.issued_at.tzinfo is None or payload.expired_at.tzinfo is None:
            raise TokenMalformedError("token timestamps must carry a timezone")
        return payload
