"""Stock replenishment: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.product.product import Product


@printeez.command(part_of="Product")
class RestockSize:
    product_id: Identifier(required=True)
    size: String(required=True, max_length=20)
    stock: Integer(required=True, min_value=0)


@printeez.command_handler(part_of=Product)
class RestockSizeHandler:
    @handle(RestockSize)
    def restock_size(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.restock(command.size, command.stock)
        repo.add(product)
