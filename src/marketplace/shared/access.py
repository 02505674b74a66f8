"""Access-control gate.

Stateless predicates evaluated before mutating operations. Every check takes
the acting principal explicitly and raises `AccessDenied` on failure.
"""

from dataclasses import dataclass
from enum import Enum

from marketplace.shared.errors import AccessDenied


class Role(Enum):
    BUYER = "Buyer"
    SELLER = "Seller"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of an operation."""

    id: str
    role: str

    @property
    def is_buyer(self) -> bool:
        return self.role == Role.BUYER.value

    @property
    def is_seller(self) -> bool:
        return self.role == Role.SELLER.value


def require_seller(principal: Principal) -> None:
    if not principal.is_seller:
        raise AccessDenied(f"Only a {Role.SELLER.value} can perform this operation")


def require_buyer(principal: Principal) -> None:
    if not principal.is_buyer:
        raise AccessDenied(f"Only a {Role.BUYER.value} can perform this operation")


def require_owner(principal: Principal, owner_id, resource: str = "resource") -> None:
    """The principal must be the owner recorded on the resource."""
    if owner_id is None or str(owner_id) != str(principal.id):
        raise AccessDenied(f"You do not own this {resource}")


def require_self(principal: Principal, user_id) -> None:
    """The principal may only act on its own behalf."""
    if str(user_id) != str(principal.id):
        raise AccessDenied("You can only act on your own behalf")


def require_participant(principal: Principal, *participant_ids) -> None:
    if str(principal.id) not in {str(pid) for pid in participant_ids if pid is not None}:
        raise AccessDenied("You are not a participant of this conversation")
