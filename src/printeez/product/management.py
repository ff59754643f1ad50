"""Catalogue maintenance: editing and withdrawing products."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from printeez.domain import printeez
from printeez.product.product import Product


@printeez.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=100)
    description: String(max_length=500)
    category: String(max_length=20)
    price: Float(min_value=0.0)
    image_url: String(max_length=500)


@printeez.command(part_of="Product")
class DiscontinueProduct:
    product_id: Identifier(required=True)


@printeez.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProductDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            category=command.category,
            price=command.price,
            image_url=command.image_url,
        )
        repo.add(product)

    @handle(DiscontinueProduct)
    def discontinue_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.discontinue()
        repo.add(product)
