"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Account")
class AccountRegistered:
    """A new buyer or seller account was created."""

    __version__ = 1

    account_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="Account")
class ProfileUpdated:
    """An account's username or email was changed."""

    __version__ = 1

    account_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)


@marketplace.event(part_of="Account")
class PasswordChanged:
    """An account's password was replaced."""

    __version__ = 1

    account_id: Identifier(required=True)
    changed_at: DateTime(required=True)
