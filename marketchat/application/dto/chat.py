"""Chat DTOs for API request/response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from marketchat.application.dto.base import CamelModel
from marketchat.application.queries.chat.list_user_chat_rooms import ChatRoomSummary
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.entities.message import Message


class ChatRoomDTO(CamelModel):
    id: int
    buyer_id: int
    seller_id: int
    product_id: int
    created_at: datetime

    @classmethod
    def from_entity(cls, room: ChatRoom) -> ChatRoomDTO:
        return cls(
            id=room.id.value,
            buyer_id=room.buyer_id.value,
            seller_id=room.seller_id.value,
            product_id=room.product_id.value,
            created_at=room.created_at,
        )


class MessageDTO(CamelModel):
    """DTO for message data returned to frontend."""

    id: int
    room_id: int
    sender_id: int
    content: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            room_id=message.room_id.value,
            sender_id=message.sender_id.value,
            content=message.content,
            is_read=message.is_read,
            created_at=message.created_at,
        )


class ChatRoomSummaryDTO(ChatRoomDTO):
    """Room as shown in a user's chat list."""

    last_message: Optional[MessageDTO] = None
    unread_count: int = 0

    @classmethod
    def from_summary(cls, summary: ChatRoomSummary) -> ChatRoomSummaryDTO:
        room = ChatRoomDTO.from_entity(summary.room)
        return cls(
            **room.model_dump(),
            last_message=(
                MessageDTO.from_entity(summary.last_message)
                if summary.last_message
                else None
            ),
            unread_count=summary.unread_count,
        )
