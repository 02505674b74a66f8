"""Product management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.shared.access import Principal, Role, require_owner
from marketplace.shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Product")
class CreateProduct:
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category_id: Identifier(required=True)
    is_available: Boolean(default=True)
    image: Text()


@marketplace.command(part_of="Product")
class UpdateProduct:
    seller_id: Identifier(required=True)
    product_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category_id: Identifier(required=True)
    is_available: Boolean(default=True)
    image: Text()


@marketplace.command(part_of="Product")
class DeleteProduct:
    seller_id: Identifier(required=True)
    product_id: Identifier(required=True)


def _owned_product(seller_id, product_id) -> Product:
    """Load a product the seller owns. A missing product is reported as forbidden too."""
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise AccessDenied("You do not own this product") from None

    require_owner(Principal(id=str(seller_id), role=Role.SELLER.value), product.seller_id, "product")
    return product


@marketplace.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            seller_id=command.seller_id,
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            is_available=command.is_available,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product listed", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = _owned_product(command.seller_id, command.product_id)
        current_domain.repository_for(Category).get(command.category_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            is_available=command.is_available,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = _owned_product(command.seller_id, command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)
        logger.info("Product removed", product_id=str(product.id), seller_id=str(command.seller_id))
