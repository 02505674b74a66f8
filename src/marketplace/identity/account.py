"""Account aggregate: a registered buyer or seller."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from marketplace.domain import marketplace
from marketplace.shared.access import Role

_FORBIDDEN_EMAIL_CHARS = (" ", ";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _utcnow():
    return datetime.now(UTC)


def is_valid_email(email: str) -> bool:
    """Structural email check: one @, non-empty dotted domain, no forbidden characters."""
    if not email or email.count("@") != 1:
        return False
    if any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS):
        return False

    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False
    if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False
    if ".." in email:
        return False
    return all(label and not label.startswith("-") and not label.endswith("-") for label in domain_part.split("."))


@marketplace.aggregate
class Account:
    """A user of the marketplace, acting either as a Buyer or as a Seller.

    The role is chosen at registration and never changes. Only a salted hash of
    the password is stored.
    """

    username: String(required=True, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    role: String(required=True, choices=Role)
    registered_at: DateTime(default=_utcnow)

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, username, email, password_hash, role):
        from marketplace.identity.events import AccountRegistered

        now = _utcnow()
        account = cls(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            registered_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                username=username,
                email=email,
                role=role,
                registered_at=now,
            )
        )
        return account

    def update_profile(self, username=None, email=None):
        from marketplace.identity.events import ProfileUpdated

        if username is not None:
            self.username = username
        if email is not None:
            self.email = email

        self.raise_(
            ProfileUpdated(
                account_id=self.id,
                username=self.username,
                email=self.email,
            )
        )

    def change_password(self, new_password_hash):
        from marketplace.identity.events import PasswordChanged

        self.password_hash = new_password_hash
        self.raise_(PasswordChanged(account_id=self.id, changed_at=_utcnow()))
