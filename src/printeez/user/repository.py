"""Repository for the User aggregate."""

from printeez.domain import printeez
from printeez.user.user import User


@printeez.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Find a User by email, case-insensitively."""
        return self._dao.query.filter(email=email.strip().lower()).all().first
