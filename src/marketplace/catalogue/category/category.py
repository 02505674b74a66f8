"""Category aggregate: a node of the product category tree."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from marketplace.domain import marketplace
from marketplace.catalogue.category.events import CategoryCreated, CategoryUpdated


def _utcnow():
    return datetime.now(UTC)


@marketplace.aggregate
class Category:
    """A grouping of products, optionally nested under a parent category.

    Categories form a simple tree through `parent_category_id`. Re-parenting is
    checked against the existing ancestry so the tree never contains a cycle.
    """

    name: String(required=True, max_length=100)
    description: Text()
    parent_category_id: Identifier()
    created_at: DateTime(default=_utcnow)
    updated_at: DateTime(default=_utcnow)

    @classmethod
    def create(cls, name, description=None, parent_category_id=None):
        now = _utcnow()
        category = cls(
            name=name,
            description=description,
            parent_category_id=parent_category_id,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                parent_category_id=parent_category_id,
            )
        )
        return category

    def update_details(self, name, description=None, parent_category_id=None):
        if parent_category_id is not None and str(parent_category_id) == str(self.id):
            raise ValidationError({"parent_category_id": ["A category cannot be its own parent"]})

        self.name = name
        self.description = description
        self.parent_category_id = parent_category_id
        self.updated_at = _utcnow()

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                parent_category_id=self.parent_category_id,
            )
        )
