"""Product creation: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.product.product import Product


@printeez.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=100)
    description: String(max_length=500)
    category: String(required=True, max_length=20)
    price: Float(required=True)
    image_url: String(max_length=500)
    sizes: Text(required=True)  # JSON object: {"Large": 10, "Small": 4}


@printeez.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        try:
            sizes = json.loads(command.sizes)
        except (TypeError, ValueError):
            raise ValidationError({"sizes": ["Sizes must be a JSON object of size to stock"]})
        if not isinstance(sizes, dict):
            raise ValidationError({"sizes": ["Sizes must be a JSON object of size to stock"]})

        product = Product.add(
            name=command.name,
            category=command.category,
            price=command.price,
            sizes=sizes,
            description=command.description,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
