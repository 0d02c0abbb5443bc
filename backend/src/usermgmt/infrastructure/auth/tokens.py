"""Email verification token generation and at-rest hashing."""
import hashlib
import logging
import secrets
from uuid import UUID

from usermgmt.config import get_settings
from usermgmt.domain.identity.entities import EmailVerification
from usermgmt.domain.identity.value_objects import EmailVerificationToken, UnverifiedEmail
from usermgmt.domain.shared.clock import Clock

logger = logging.getLogger(__name__)


def generate_verification_token(num_bytes: int | None = None) -> EmailVerificationToken:
    """Random lowercase-hex token; two hex characters per byte."""
    num_bytes = num_bytes or get_settings().verification_token_bytes
    token = EmailVerificationToken.of(secrets.token_hex(num_bytes))
    logger.debug("Generated verification token of %d characters", len(token.value))
    return token


def hash_verification_token(token: EmailVerificationToken) -> EmailVerificationToken:
    """SHA-256 of the token for secure storage. The digest is itself a valid token."""
    return EmailVerificationToken.of(hashlib.sha256(token.value.encode()).hexdigest())


def issue_email_verification(*, user_id: UUID, email: UnverifiedEmail, clock: Clock) -> EmailVerification:
    """Start a verification of ``email`` with a fresh token and the configured lifetime."""
    settings = get_settings()
    verification = EmailVerification.issue(
        user_id=user_id,
        email=email,
        token=generate_verification_token(),
        clock=clock,
        ttl_seconds=settings.verification_token_ttl_seconds,
    )
    logger.info("Issued email verification %s for user %s", verification.id, user_id)
    return verification
