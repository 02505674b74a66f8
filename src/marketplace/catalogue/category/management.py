"""Category management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.seller_category.link import SellerCategory, find_link, links_of_category
from marketplace.domain import marketplace
from marketplace.shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Category")
class CreateCategory:
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()
    parent_category_id: Identifier()


@marketplace.command(part_of="Category")
class UpdateCategory:
    seller_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    description: Text()
    parent_category_id: Identifier()


@marketplace.command(part_of="Category")
class DeleteCategory:
    seller_id: Identifier(required=True)
    category_id: Identifier(required=True)


def ensure_acyclic(category_id, parent_category_id) -> None:
    """Walk up from the proposed parent; reaching `category_id` would close a cycle."""
    if parent_category_id is None:
        return

    repo = current_domain.repository_for(Category)
    seen = set()
    current_id = str(parent_category_id)
    while current_id is not None and current_id not in seen:
        if current_id == str(category_id):
            raise ValidationError({"parent_category_id": ["Moving the category here would create a cycle"]})
        seen.add(current_id)
        try:
            ancestor = repo.get(current_id)
        except ObjectNotFoundError:
            return
        current_id = str(ancestor.parent_category_id) if ancestor.parent_category_id else None


def subcategories_of(category_id):
    return (
        current_domain.repository_for(Category)
        ._dao.query.filter(parent_category_id=str(category_id))
        .limit(None)
        .all()
        .items
    )


def products_in(category_id):
    return (
        current_domain.repository_for(Product)
        ._dao.query.filter(category_id=str(category_id))
        .limit(None)
        .all()
        .items
    )


@marketplace.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if command.parent_category_id:
            repo.get(command.parent_category_id)

        category = Category.create(
            name=command.name,
            description=command.description,
            parent_category_id=command.parent_category_id,
        )
        repo.add(category)

        # The creating seller operates in the new category
        current_domain.repository_for(SellerCategory).add(
            SellerCategory.link(user_id=command.seller_id, category_id=category.id)
        )
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if find_link(command.seller_id, category.id) is None:
            raise AccessDenied("You are not linked to this category")

        if command.parent_category_id:
            repo.get(command.parent_category_id)
            ensure_acyclic(category.id, command.parent_category_id)

        category.update_details(
            name=command.name,
            description=command.description,
            parent_category_id=command.parent_category_id,
        )
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if products_in(category.id) or subcategories_of(category.id):
            raise InvalidOperationError("Cannot delete a category that has products or subcategories")

        # Ownership is not enforced on delete; flag the cases where it would have mattered.
        if find_link(command.seller_id, category.id) is None:
            logger.warning(
                "Category deleted by a seller not linked to it",
                category_id=str(category.id),
                seller_id=str(command.seller_id),
            )

        link_dao = current_domain.repository_for(SellerCategory)._dao
        for link in links_of_category(category.id):
            link_dao.delete(link)

        repo._dao.delete(category)
        logger.info("Category deleted", category_id=str(category.id))
