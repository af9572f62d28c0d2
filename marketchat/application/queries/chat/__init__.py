"""Chat-related queries."""

from marketchat.application.queries.chat.get_chat_room import (
    GetChatRoomQuery,
    GetChatRoomHandler,
)
from marketchat.application.queries.chat.list_room_messages import (
    ListRoomMessagesQuery,
    ListRoomMessagesHandler,
)
from marketchat.application.queries.chat.list_user_chat_rooms import (
    ChatRoomSummary,
    ListUserChatRoomsQuery,
    ListUserChatRoomsHandler,
)
from marketchat.application.queries.chat.count_unread_messages import (
    CountUnreadMessagesQuery,
    CountUnreadMessagesHandler,
)

__all__ = [
    "GetChatRoomQuery",
    "GetChatRoomHandler",
    "ListRoomMessagesQuery",
    "ListRoomMessagesHandler",
    "ChatRoomSummary",
    "ListUserChatRoomsQuery",
    "ListUserChatRoomsHandler",
    "CountUnreadMessagesQuery",
    "CountUnreadMessagesHandler",
]
