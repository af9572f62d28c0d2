"""Chat room and message commands."""

from .get_or_create_room import (
    GetOrCreateChatRoomCommand,
    GetOrCreateChatRoomHandler,
    GetOrCreateChatRoomResult,
)
from .send_message import SendMessageCommand, SendMessageHandler
from .mark_messages_read import MarkMessagesReadCommand, MarkMessagesReadHandler
from .delete_chat_room import DeleteChatRoomCommand, DeleteChatRoomHandler

__all__ = [
    "GetOrCreateChatRoomCommand",
    "GetOrCreateChatRoomHandler",
    "GetOrCreateChatRoomResult",
    "SendMessageCommand",
    "SendMessageHandler",
    "MarkMessagesReadCommand",
    "MarkMessagesReadHandler",
    "DeleteChatRoomCommand",
    "DeleteChatRoomHandler",
]
