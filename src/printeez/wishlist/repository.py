"""Repository for the Wishlist aggregate."""

from printeez.domain import printeez
from printeez.wishlist.wishlist import Wishlist


@printeez.repository(part_of=Wishlist)
class WishlistRepository:
    def for_user(self, user_id) -> Wishlist | None:
        found = self._dao.query.filter(user_id=str(user_id)).all().first
        return self.get(found.id) if found else None
