"""SellerCategory management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.seller_category.link import SellerCategory, find_link
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="SellerCategory")
class LinkSellerCategory:
    user_id: Identifier(required=True)
    category_id: Identifier(required=True)


@marketplace.command(part_of="SellerCategory")
class UpdateSellerCategory:
    """Re-submit an existing link. The pair is the identity of the link and cannot change."""

    user_id: Identifier(required=True)
    category_id: Identifier(required=True)
    new_user_id: Identifier(required=True)
    new_category_id: Identifier(required=True)


@marketplace.command(part_of="SellerCategory")
class UnlinkSellerCategory:
    user_id: Identifier(required=True)
    category_id: Identifier(required=True)


def _existing_link(user_id, category_id) -> SellerCategory:
    link = find_link(user_id, category_id)
    if link is None:
        raise ObjectNotFoundError(f"Seller {user_id} is not linked to category {category_id}")
    return link


@marketplace.command_handler(part_of=SellerCategory)
class ManageSellerCategoryHandler:
    @handle(LinkSellerCategory)
    def link(self, command):
        current_domain.repository_for(Category).get(command.category_id)

        if find_link(command.user_id, command.category_id) is not None:
            raise ValidationError({"category_id": ["Seller is already linked to this category"]})

        link = SellerCategory.link(user_id=command.user_id, category_id=command.category_id)
        current_domain.repository_for(SellerCategory).add(link)
        return str(link.id)

    @handle(UpdateSellerCategory)
    def update(self, command):
        if str(command.new_user_id) != str(command.user_id) or str(command.new_category_id) != str(
            command.category_id
        ):
            raise ValidationError({"category_id": ["A seller-category link cannot be moved; unlink and link instead"]})

        link = _existing_link(command.user_id, command.category_id)
        return str(link.id)

    @handle(UnlinkSellerCategory)
    def unlink(self, command):
        link = _existing_link(command.user_id, command.category_id)
        current_domain.repository_for(SellerCategory)._dao.delete(link)
        logger.info(
            "Seller unlinked from category",
            user_id=str(command.user_id),
            category_id=str(command.category_id),
        )
