"""Repository for the Cart aggregate."""

from printeez.cart.cart import Cart
from printeez.domain import printeez


@printeez.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart | None:
        """The user's cart, or None if they never added anything."""
        found = self._dao.query.filter(user_id=str(user_id)).all().first
        return self.get(found.id) if found else None
