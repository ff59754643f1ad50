"""Wishlist aggregate: products a user has saved for later, one list per user."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier

from printeez.domain import printeez
from printeez.shared.errors import WishlistItemNotFound
from printeez.wishlist.events import WishlistCleared, WishlistProductAdded, WishlistProductRemoved


@printeez.entity(part_of="Wishlist")
class WishlistEntry:
    product_id = Identifier(required=True)
    added_at = DateTime()


@printeez.aggregate
class Wishlist:
    user_id = Identifier(required=True, unique=True)
    entries = HasMany(WishlistEntry)
    updated_at = DateTime(default=lambda: datetime.now(UTC))

    def entry_for(self, product_id):
        return next((e for e in self.entries if str(e.product_id) == str(product_id)), None)

    def add_product(self, product_id):
        if self.entry_for(product_id) is not None:
            raise ValidationError({"product_id": ["Item already in wishlist"]})

        now = datetime.now(UTC)
        self.add_entries(WishlistEntry(product_id=product_id, added_at=now))
        self.updated_at = now
        self.raise_(WishlistProductAdded(wishlist_id=self.id, user_id=self.user_id, product_id=product_id))

    def remove_product(self, product_id):
        entry = self.entry_for(product_id)
        if entry is None:
            raise WishlistItemNotFound(product_id)

        self.remove_entries(entry)
        self.updated_at = datetime.now(UTC)
        self.raise_(WishlistProductRemoved(wishlist_id=self.id, product_id=product_id))

    def clear(self):
        for entry in list(self.entries):
            self.remove_entries(entry)
        self.updated_at = datetime.now(UTC)
        self.raise_(WishlistCleared(wishlist_id=self.id, user_id=self.user_id))
