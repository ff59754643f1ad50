"""User aggregate with the EmailAddress value object.

Users own orders and receive order confirmations. The admin flag gates the
catalogue management and order status endpoints.
"""

import hashlib
import hmac
import secrets
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from printeez.domain import printeez

_HASH_ALGORITHM = "sha256"
_HASH_ITERATIONS = 260_000


def hash_password(password: str, salt: str | None = None) -> str:
    """Return ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>`` for ``password``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(_HASH_ALGORITHM, password.encode(), salt.encode(), _HASH_ITERATIONS)
    return f"pbkdf2_{_HASH_ALGORITHM}${_HASH_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        _, iterations, salt, expected = encoded.split("$")
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac(_HASH_ALGORITHM, password.encode(), salt.encode(), int(iterations))
    return hmac.compare_digest(digest.hex(), expected)


@printeez.value_object
class EmailAddress:
    """A structurally valid email address: one @, a dotted domain, no whitespace."""

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch in email for ch in (" ", "\t", "\n")) or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        for forbidden in (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\"):
            if forbidden in email:
                raise ValidationError({"email": [f"Invalid email address: {email!r}"]})


@printeez.aggregate
class User:
    """A registered shopper, optionally with admin rights."""

    name: String(required=True, min_length=2, max_length=50)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    address: String(max_length=200)
    is_admin: Boolean(default=False)
    registered_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def register(cls, name, email, password, address=None):
        from printeez.user.events import UserRegistered

        if not password or len(password) < 6:
            raise ValidationError({"password": ["Password must be at least 6 characters"]})

        email = EmailAddress(address=email.strip().lower()).address
        now = datetime.now(UTC)
        user = cls(
            name=name.strip() if name else name,
            email=email,
            password_hash=hash_password(password),
            address=address,
            registered_at=now,
        )
        user.raise_(UserRegistered(user_id=user.id, name=user.name, email=email, registered_at=now))
        return user

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def promote_to_admin(self):
        from printeez.user.events import UserPromotedToAdmin

        if self.is_admin:
            return
        self.is_admin = True
        self.raise_(UserPromotedToAdmin(user_id=self.id, email=self.email))
