"""Repository for the Product aggregate."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.query import Q

from printeez.domain import printeez
from printeez.product.product import Product, ProductStatus, SizeStock


@printeez.repository(part_of=Product)
class ProductRepository:
    def get_active(self, product_id):
        """Load a product that is still on sale."""
        product = self.get(product_id)
        if not product.is_active:
            raise ObjectNotFoundError(f"Product {product_id} not found")
        return product

    def by_category(self, category=None, page=1, limit=20):
        """Products on sale newest-first, optionally restricted to one category.

        Returns ``(products, total)``.
        """
        query = self._dao.query.filter(status=ProductStatus.ACTIVE.value)
        if category:
            query = query.filter(category=category)
        results = query.order_by("-created_at").offset((page - 1) * limit).limit(limit).all()
        return results.items, results.total

    def top_selling(self, limit=10):
        """Products on sale with the highest sales counter first."""
        return (
            self._dao.query.filter(status=ProductStatus.ACTIVE.value)
            .order_by("-sales_count")
            .limit(limit)
            .all()
            .items
        )

    def take_stock(self, product, size, expected):
        """Write ``product``'s in-memory stock for ``size`` if the store still holds ``expected``.

        The check and the write are one UPDATE ... WHERE statement, so the
        database decides which of two concurrent placements gets the units.
        Returns False when the stored count has moved on.
        """
        entry = product.size_stock(size)
        updated = self._domain.repository_for(SizeStock)._dao._update_all(
            Q(id=entry.id, stock=expected),
            stock=entry.stock,
        )
        return updated == 1

    def record_sale(self, product, expected):
        """Write ``product``'s sales counter if the store still holds ``expected``."""
        updated = self._dao._update_all(
            Q(id=product.id, sales_count=expected),
            sales_count=product.sales_count,
            updated_at=datetime.now(UTC),
        )
        return updated == 1
