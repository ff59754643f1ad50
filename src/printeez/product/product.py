"""Product aggregate root with the SizeStock entity.

Stock is tracked per size. Every unit sold through an order decrements the
size's stock-count and increments the product's sales counter by the same
quantity; neither counter is ever adjusted any other way except through an
explicit restock.

Prices are held in whole cents so that order totals add up exactly.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from printeez.domain import printeez
from printeez.shared.errors import InsufficientStock, SizeUnavailable


class ProductCategory(Enum):
    URBAN = "urban"
    TYPOGRAPHY = "typography"
    ABSTRACT = "abstract"
    ANIME = "anime"


class ProductSize(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    EXTRA_LARGE = "Extra Large"


class ProductStatus(Enum):
    ACTIVE = "Active"
    DISCONTINUED = "Discontinued"


def to_cents(amount):
    """Round a price to two decimal places."""
    if amount is None:
        return None
    return round(float(amount), 2)


@printeez.entity(part_of="Product")
class SizeStock:
    """Remaining sellable units of one size of a product."""

    size: String(required=True, choices=ProductSize)
    stock: Integer(required=True, min_value=0)


@printeez.aggregate
class Product:
    """A printed design offered in one or more sizes."""

    name: String(required=True, min_length=3, max_length=100)
    description: String(max_length=500)
    category: String(required=True, choices=ProductCategory)
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500)
    sizes: HasMany(SizeStock)
    sales_count: Integer(default=0, min_value=0)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def sizes_must_be_unique(self):
        labels = [s.size for s in self.sizes]
        if len(labels) != len(set(labels)):
            raise ValidationError({"sizes": ["Each size can only be listed once"]})

    @classmethod
    def add(cls, name, category, price, sizes, description=None, image_url=None):
        """Create a product carrying the given ``{size: stock}`` counts."""
        from printeez.product.events import ProductAdded

        if not sizes:
            raise ValidationError({"sizes": ["At least one size is required"]})

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            category=category,
            price=to_cents(price),
            image_url=image_url,
            sizes=[SizeStock(size=size, stock=stock) for size, stock in sizes.items()],
            status=ProductStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                price=product.price,
                sizes=", ".join(sizes),
                added_at=now,
            )
        )
        return product

    @property
    def is_active(self):
        return self.status == ProductStatus.ACTIVE.value

    def update_details(self, name=None, description=None, category=None, price=None, image_url=None):
        """Change the catalogue listing. Orders already placed keep their snapshot."""
        from printeez.product.events import ProductDetailsUpdated

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        if price is not None:
            self.price = to_cents(price)
        if image_url is not None:
            self.image_url = image_url

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                category=self.category,
                price=self.price,
            )
        )

    def discontinue(self):
        """Withdraw the product from sale. Historical orders still reference it."""
        from printeez.product.events import ProductDiscontinued

        if not self.is_active:
            raise ValidationError({"status": ["Product is already discontinued"]})

        now = datetime.now(UTC)
        self.status = ProductStatus.DISCONTINUED.value
        self.updated_at = now

        self.raise_(ProductDiscontinued(product_id=self.id, discontinued_at=now))

    def size_stock(self, size):
        """Return the SizeStock entry for ``size``, or None."""
        return next((s for s in self.sizes if s.size == size), None)

    def stock_for(self, size):
        entry = self.size_stock(size)
        return entry.stock if entry else 0
    def reserve(self, size, quantity):
        """Take ``quantity`` units of ``size`` out of stock for an order."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        entry = self.size_stock(size)
        if entry is None:
            raise SizeUnavailable(self.name, size)
        if quantity > entry.stock:
            raise InsufficientStock(self.name, size, available=entry.stock, requested=quantity)

        entry.stock = entry.stock - quantity
        self.sales_count = (self.sales_count or 0) + quantity
        self.updated_at = datetime.now(UTC)

    def restock(self, size, stock):
        """Set the stock-count of ``size``, adding the size if it is new."""
        from printeez.product.events import SizeRestocked

        if stock is None or stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        entry = self.size_stock(size)
        previous = entry.stock if entry else 0
        if entry is None:
            self.add_sizes(SizeStock(size=size, stock=stock))
        else:
            entry.stock = stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            SizeRestocked(
                product_id=self.id,
                size=size,
                previous_stock=previous,
                new_stock=stock,
            )
        )
