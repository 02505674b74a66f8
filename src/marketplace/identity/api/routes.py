"""FastAPI endpoints for accounts: registration, login and profile."""

from fastapi import APIRouter, Depends, Response
from protean.utils.globals import current_domain

from marketplace.identity.account import Account
from marketplace.identity.api.dependencies import get_principal
from marketplace.identity.api.schemas import (
    AccountResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    StatusResponse,
    TokenResponse,
    UpdateMeRequest,
)
from marketplace.identity.login import login as issue_token
from marketplace.identity.profile import ChangePassword, DeleteAccount, UpdateAccountProfile
from marketplace.identity.registration import RegisterAccount
from marketplace.shared.access import Principal

router = APIRouter(prefix="/api/account", tags=["account"])


def _account_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=str(account.id),
        username=account.username,
        email=account.email,
        role=account.role,
        registered_at=account.registered_at,
    )


@router.post("/register", status_code=201, response_model=AccountResponse)
async def register(body: RegisterRequest) -> AccountResponse:
    command = RegisterAccount(
        username=body.username,
        email=body.email,
        password=body.password,
        role=body.role.value,
    )
    account_id = current_domain.process(command, asynchronous=False)
    account = current_domain.repository_for(Account).get(account_id)
    return _account_response(account)


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest) -> TokenResponse:
    return TokenResponse(**issue_token(body.username, body.password))


@router.post("/logout", response_model=StatusResponse)
async def logout(principal: Principal = Depends(get_principal)) -> StatusResponse:  # noqa: ARG001
    # Tokens are stateless; the client discards its copy.
    return StatusResponse()


@router.get("/me", response_model=AccountResponse)
async def get_me(principal: Principal = Depends(get_principal)) -> AccountResponse:
    account = current_domain.repository_for(Account).get(principal.id)
    return _account_response(account)


@router.put("/me", response_model=AccountResponse)
async def update_me(body: UpdateMeRequest, principal: Principal = Depends(get_principal)) -> AccountResponse:
    command = UpdateAccountProfile(
        account_id=principal.id,
        username=body.username,
        email=body.email,
    )
    current_domain.process(command, asynchronous=False)
    account = current_domain.repository_for(Account).get(principal.id)
    return _account_response(account)


@router.delete("/me", status_code=204, response_class=Response)
async def delete_me(principal: Principal = Depends(get_principal)) -> Response:
    current_domain.process(DeleteAccount(account_id=principal.id), asynchronous=False)
    return Response(status_code=204)


@router.post("/change-password", response_model=StatusResponse)
async def change_password(
    body: ChangePasswordRequest, principal: Principal = Depends(get_principal)
) -> StatusResponse:
    command = ChangePassword(
        account_id=principal.id,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
