"""Profile maintenance: username/email updates, password changes and account deletion."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.account import Account
from marketplace.identity.registration import ensure_unique
from marketplace.identity.security import hash_password, verify_password

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Account")
class UpdateAccountProfile:
    account_id: Identifier(required=True)
    username: String(max_length=50)
    email: String(max_length=254)


@marketplace.command(part_of="Account")
class ChangePassword:
    account_id: Identifier(required=True)
    current_password: String(required=True, max_length=128, sanitize=False)
    new_password: String(required=True, min_length=6, max_length=128, sanitize=False)


@marketplace.command(part_of="Account")
class DeleteAccount:
    account_id: Identifier(required=True)


@marketplace.command_handler(part_of=Account)
class ManageAccountHandler:
    @handle(UpdateAccountProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        ensure_unique(username=command.username, email=command.email, exclude_id=account.id)

        account.update_profile(username=command.username, email=command.email)
        repo.add(account)

    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)

        if not verify_password(command.current_password, account.password_hash):
            raise ValidationError({"current_password": ["Current password is incorrect"]})

        account.change_password(hash_password(command.new_password))
        repo.add(account)

    @handle(DeleteAccount)
    def delete_account(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        repo._dao.delete(account)
        logger.info("Account deleted", account_id=str(account.id), role=account.role)
