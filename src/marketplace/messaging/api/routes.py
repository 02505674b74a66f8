"""FastAPI routes for messaging between buyers and sellers."""

from dataclasses import asdict

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.identity.api.dependencies import get_principal, get_seller
from marketplace.messaging.api.schemas import MessageResponse, SendMessageRequest, ThreadResponse
from marketplace.messaging.message.conversations import conversation_with, product_chat, seller_threads
from marketplace.messaging.message.message import ChatMessage
from marketplace.messaging.message.sending import MarkMessageRead, SendMessage
from marketplace.shared.access import Principal

message_router = APIRouter(prefix="/api/message", tags=["messages"])


def _message_list(messages) -> list[MessageResponse]:
    names: dict[str, str | None] = {}
    result = []
    for message in messages:
        product_name = None
        if message.product_id:
            key = str(message.product_id)
            if key not in names:
                try:
                    names[key] = current_domain.repository_for(Product).get(key).name
                except ObjectNotFoundError:
                    names[key] = None
            product_name = names[key]

        result.append(
            MessageResponse(
                id=str(message.id),
                sender_id=str(message.sender_id),
                receiver_id=str(message.receiver_id),
                content=message.content,
                product_id=str(message.product_id) if message.product_id else None,
                product_name=product_name,
                sent_at=message.sent_at,
                is_read=message.is_read,
            )
        )
    return result


@message_router.get("/with/{user_id}", response_model=list[MessageResponse])
async def get_conversation(
    user_id: str, product_id: str | None = None, principal: Principal = Depends(get_principal)
) -> list[MessageResponse]:
    return _message_list(conversation_with(principal.id, user_id, product_id=product_id))


@message_router.get("/threads", response_model=list[ThreadResponse])
async def list_threads(principal: Principal = Depends(get_seller)) -> list[ThreadResponse]:
    return [ThreadResponse(**asdict(t)) for t in seller_threads(principal.id)]


@message_router.get("/chat", response_model=list[MessageResponse])
async def get_product_chat(
    buyer_id: str, seller_id: str, product_id: str, principal: Principal = Depends(get_principal)
) -> list[MessageResponse]:
    return _message_list(product_chat(principal, buyer_id, seller_id, product_id))


@message_router.post("", status_code=201, response_model=MessageResponse)
async def send_message(body: SendMessageRequest, principal: Principal = Depends(get_principal)) -> MessageResponse:
    command = SendMessage(
        sender_id=principal.id,
        receiver_id=body.receiver_id,
        content=body.content,
        product_id=body.product_id,
    )
    message_id = current_domain.process(command, asynchronous=False)
    return _message_list([current_domain.repository_for(ChatMessage).get(message_id)])[0]


@message_router.put("/{message_id}/read", response_model=MessageResponse)
async def mark_read(message_id: str, principal: Principal = Depends(get_principal)) -> MessageResponse:
    current_domain.process(MarkMessageRead(reader_id=principal.id, message_id=message_id), asynchronous=False)
    return _message_list([current_domain.repository_for(ChatMessage).get(message_id)])[0]
