"""
Chat API Router - chat rooms, messages and read state.

Guidelines:
- Receives handlers via Dependency Injection (Dishka)
- Thin layer: extracts parameters, builds the Command/Query, maps domain
  errors to HTTP status codes
- User ids in query strings may be internal or external ids; the handlers
  resolve them

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← DTO ←
"""

from logging import getLogger
from fastapi import APIRouter, Path, Query, Response, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from marketchat.application.commands.chat import (
    DeleteChatRoomCommand,
    DeleteChatRoomHandler,
    GetOrCreateChatRoomCommand,
    GetOrCreateChatRoomHandler,
    MarkMessagesReadCommand,
    MarkMessagesReadHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from marketchat.application.queries.chat import (
    CountUnreadMessagesHandler,
    CountUnreadMessagesQuery,
    GetChatRoomHandler,
    GetChatRoomQuery,
    ListRoomMessagesHandler,
    ListRoomMessagesQuery,
    ListUserChatRoomsHandler,
    ListUserChatRoomsQuery,
)
from marketchat.application.dto import ChatRoomDTO, ChatRoomSummaryDTO, MessageDTO
from marketchat.application.dto.base import CamelModel
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.presentation.api.params import MAX_ROW_ID
from marketchat.presentation.errors import DOMAIN_ERRORS, to_http_exception

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequest(BaseModel):
    """Request body for sending a message."""

    content: str


class MarkReadResponse(CamelModel):
    updated: int


class UnreadCountResponse(CamelModel):
    unread_count: int


class DeleteChatRoomResponse(BaseModel):
    success: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/chat", tags=["chat"])


# ==================== ENDPOINTS ====================


@router.post("/rooms", response_model=ChatRoomDTO)
@inject
async def get_or_create_room(
    response: Response,
    handler: FromDishka[GetOrCreateChatRoomHandler],
    buyer_id: int = Query(alias="buyerId"),
    seller_id: int = Query(alias="sellerId"),
    product_id: int = Query(alias="productId", gt=0, le=MAX_ROW_ID),
):
    """
    Return the room for (buyer, seller, product), creating it on first contact.

    201 when this call created the room, 200 when it already existed.
    """
    try:
        result = await handler.execute(
            GetOrCreateChatRoomCommand(
                buyer_id=buyer_id,
                seller_id=seller_id,
                product_id=ProductId(product_id),
            )
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e

    response.status_code = (
        status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    )
    return ChatRoomDTO.from_entity(result.room)


@router.get("/rooms/user/{user_id}", response_model=list[ChatRoomSummaryDTO])
@inject
async def list_user_rooms(
    handler: FromDishka[ListUserChatRoomsHandler],
    user_id: int = Path(),
):
    """Rooms where the user is buyer or seller, newest first."""
    try:
        summaries = await handler.execute(ListUserChatRoomsQuery(user_id=user_id))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [ChatRoomSummaryDTO.from_summary(summary) for summary in summaries]


@router.get("/rooms/{room_id}", response_model=ChatRoomDTO)
@inject
async def get_room(
    handler: FromDishka[GetChatRoomHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
):
    try:
        room = await handler.execute(GetChatRoomQuery(room_id=ChatRoomId(room_id)))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return ChatRoomDTO.from_entity(room)


@router.delete("/rooms/{room_id}", response_model=DeleteChatRoomResponse)
@inject
async def delete_room(
    handler: FromDishka[DeleteChatRoomHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
):
    """Delete a room together with its messages."""
    try:
        success = await handler.execute(DeleteChatRoomCommand(room_id=ChatRoomId(room_id)))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return DeleteChatRoomResponse(success=success)


@router.get("/rooms/{room_id}/messages", response_model=list[MessageDTO])
@inject
async def list_messages(
    handler: FromDishka[ListRoomMessagesHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
):
    """Full message history, oldest first."""
    try:
        messages = await handler.execute(
            ListRoomMessagesQuery(room_id=ChatRoomId(room_id))
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [MessageDTO.from_entity(message) for message in messages]


@router.post(
    "/rooms/{room_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
    sender_id: int = Query(alias="senderId"),
):
    try:
        message = await handler.execute(
            SendMessageCommand(
                room_id=ChatRoomId(room_id),
                sender_id=sender_id,
                content=request.content,
            )
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return MessageDTO.from_entity(message)


@router.put("/rooms/{room_id}/read", response_model=MarkReadResponse)
@inject
async def mark_read(
    handler: FromDishka[MarkMessagesReadHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
    user_id: int = Query(alias="userId"),
):
    """Mark every message the other side sent as read. Idempotent."""
    try:
        updated = await handler.execute(
            MarkMessagesReadCommand(room_id=ChatRoomId(room_id), reader_id=user_id)
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return MarkReadResponse(updated=updated)


@router.get("/rooms/{room_id}/unread", response_model=UnreadCountResponse)
@inject
async def count_unread(
    handler: FromDishka[CountUnreadMessagesHandler],
    room_id: int = Path(gt=0, le=MAX_ROW_ID),
    user_id: int = Query(alias="userId"),
):
    try:
        unread = await handler.execute(
            CountUnreadMessagesQuery(room_id=ChatRoomId(room_id), reader_id=user_id)
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return UnreadCountResponse(unread_count=unread)
