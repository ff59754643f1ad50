"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from printeez.domain import printeez


@printeez.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    sizes: String()
    added_at: DateTime(required=True)


@printeez.event(part_of="Product")
class SizeRestocked:
    __version__ = 1

    product_id: Identifier(required=True)
    size: String(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@printeez.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)


@printeez.event(part_of="Product")
class ProductDiscontinued:
    """The product was withdrawn from sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    discontinued_at: DateTime(required=True)
