"""Account registration: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.account import Account
from marketplace.identity.security import hash_password
from marketplace.shared.access import Role

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Account")
class RegisterAccount:
    """Create a buyer or seller account."""

    username: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    password: String(required=True, min_length=6, max_length=128, sanitize=False)
    role: String(required=True, choices=Role)


def ensure_unique(username=None, email=None, exclude_id=None):
    """Reject a username or email already taken by another account."""
    repo = current_domain.repository_for(Account)
    errors = {}

    if username is not None:
        taken = repo._dao.query.filter(username=username).all().items
        if any(str(a.id) != str(exclude_id) for a in taken):
            errors["username"] = [f"Username {username!r} is already taken"]

    if email is not None:
        taken = repo._dao.query.filter(email=email).all().items
        if any(str(a.id) != str(exclude_id) for a in taken):
            errors["email"] = [f"Email {email!r} is already registered"]

    if errors:
        raise ValidationError(errors)


@marketplace.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        ensure_unique(username=command.username, email=command.email)

        account = Account.register(
            username=command.username,
            email=command.email,
            password_hash=hash_password(command.password),
            role=command.role,
        )
        current_domain.repository_for(Account).add(account)
        logger.info("Account registered", account_id=str(account.id), role=command.role)
        return str(account.id)
