"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the tree."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    parent_category_id: Identifier()


@marketplace.event(part_of="Category")
class CategoryUpdated:
    """A category was renamed, described or moved under another parent."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    parent_category_id: Identifier()
