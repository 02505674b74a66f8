"""Application tests for registration, profile updates, password changes and account deletion."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from marketplace.identity.account import Account
from marketplace.identity.login import login
from marketplace.identity.profile import ChangePassword, DeleteAccount, UpdateAccountProfile
from marketplace.identity.registration import RegisterAccount
from marketplace.identity.security import decode_token, verify_password
from marketplace.shared.errors import NotAuthenticated


def _register(**overrides):
    defaults = {
        "username": "jane",
        "email": "jane@example.com",
        "password": "Secret123!",
        "role": "Buyer",
    }
    defaults.update(overrides)
    return current_domain.process(RegisterAccount(**defaults), asynchronous=False)


class TestRegisterAccount:
    def test_register_persists_hashed_password(self):
        account_id = _register()
        account = current_domain.repository_for(Account).get(account_id)
        assert account.username == "jane"
        assert account.password_hash != "Secret123!"
        assert verify_password("Secret123!", account.password_hash)

    def test_duplicate_username_is_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="other@example.com")
        assert "username" in exc.value.messages

    def test_duplicate_email_is_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(username="other")
        assert "email" in exc.value.messages

    def test_short_password_is_rejected(self):
        with pytest.raises(ValidationError):
            RegisterAccount(username="jane", email="jane@example.com", password="123", role="Buyer")

    def test_password_is_not_sanitized(self):
        _register(password="a<b>&c123")
        assert login("jane", "a<b>&c123")["username"] == "jane"


class TestLogin:
    def test_login_issues_token_for_account(self):
        account_id = _register(role="Seller")
        result = login("jane", "Secret123!")
        principal = decode_token(result["access_token"])
        assert principal.id == account_id
        assert principal.role == "Seller"
        assert result["token_type"] == "bearer"

    def test_wrong_password(self):
        _register()
        with pytest.raises(NotAuthenticated):
            login("jane", "nope")

    def test_unknown_user(self):
        with pytest.raises(NotAuthenticated):
            login("ghost", "Secret123!")


class TestProfile:
    def test_update_profile(self):
        account_id = _register()
        current_domain.process(
            UpdateAccountProfile(account_id=account_id, username="jane.doe", email="jd@example.com"),
            asynchronous=False,
        )
        account = current_domain.repository_for(Account).get(account_id)
        assert account.username == "jane.doe"
        assert account.email == "jd@example.com"

    def test_keeping_own_username_is_allowed(self):
        account_id = _register()
        current_domain.process(UpdateAccountProfile(account_id=account_id, username="jane"), asynchronous=False)

    def test_taking_another_username_is_rejected(self):
        _register(username="bob", email="bob@example.com")
        account_id = _register()
        with pytest.raises(ValidationError):
            current_domain.process(UpdateAccountProfile(account_id=account_id, username="bob"), asynchronous=False)


class TestChangePassword:
    def test_change_password(self):
        account_id = _register()
        current_domain.process(
            ChangePassword(account_id=account_id, current_password="Secret123!", new_password="Changed456!"),
            asynchronous=False,
        )
        assert login("jane", "Changed456!")["account_id"] == account_id
        with pytest.raises(NotAuthenticated):
            login("jane", "Secret123!")

    def test_wrong_current_password(self):
        account_id = _register()
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                ChangePassword(account_id=account_id, current_password="wrong", new_password="Changed456!"),
                asynchronous=False,
            )
        assert "current_password" in exc.value.messages


class TestDeleteAccount:
    def test_account_is_removed(self):
        account_id = _register()
        current_domain.process(DeleteAccount(account_id=account_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Account).get(account_id)
        with pytest.raises(NotAuthenticated):
            login("jane", "Secret123!")

    def test_username_is_free_again(self):
        account_id = _register()
        current_domain.process(DeleteAccount(account_id=account_id), asynchronous=False)
        assert _register() != account_id

    def test_missing_account(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteAccount(account_id="missing"), asynchronous=False)
