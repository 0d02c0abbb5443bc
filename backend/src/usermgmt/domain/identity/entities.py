"""Domain entities for the Identity bounded context."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from usermgmt.domain.shared.clock import Clock

from .exceptions import (
    VerificationAlreadyUsedError,
    VerificationExpiredError,
    VerificationTokenMismatchError,
)
from .value_objects import (
    Argon2idPassword,
    Email,
    EmailVerificationToken,
    UnverifiedEmail,
    UserName,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EmailVerification:
    """A pending confirmation of ``email`` for ``user_id``."""

    id: UUID
    user_id: UUID
    email: UnverifiedEmail
    token: EmailVerificationToken
    expires_at: datetime
    created_at: datetime = field(default_factory=_utcnow)
    verified_at: datetime | None = None

    @classmethod
    def issue(
        cls,
        *,
        user_id: UUID,
        email: UnverifiedEmail,
        token: EmailVerificationToken,
        clock: Clock,
        ttl_seconds: int,
    ) -> EmailVerification:
        return cls(
            id=uuid4(),
            user_id=user_id,
            email=email,
            token=token,
            expires_at=clock.now_after_seconds(ttl_seconds),
            created_at=clock.now(),
        )

    @property
    def is_verified(self) -> bool:
        return self.verified_at is not None

    def is_expired(self, clock: Clock) -> bool:
        return clock.now() >= self.expires_at

    def mark_verified(self, clock: Clock) -> None:
        self.verified_at = clock.now()


@dataclass
class User:
    id: UUID
    email: Email
    password: Argon2idPassword
    name: UserName = field(default_factory=UserName.none)
    is_verified: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def rename(self, name: UserName) -> None:
        self.name = name
        self.updated_at = _utcnow()

    def change_password(self, password: Argon2idPassword) -> None:
        self.password = password
        self.updated_at = _utcnow()

    def confirm_email(
        self,
        verification: EmailVerification,
        token: EmailVerificationToken,
        clock: Clock,
    ) -> None:
        """Adopt the address held by ``verification`` once its token checks out."""
        if verification.user_id != self.id or verification.token != token:
            raise VerificationTokenMismatchError("Verification token does not match")
        if verification.is_verified:
            raise VerificationAlreadyUsedError("Verification has already been used")
        if verification.is_expired(clock):
            raise VerificationExpiredError("Verification has expired")

        verification.mark_verified(clock)
        self.email = Email.of(verification.email.value)
        self.is_verified = True
        self.updated_at = clock.now()
