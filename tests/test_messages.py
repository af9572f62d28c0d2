"""
Tests for appending to and reading the per-room message log.

Run with: pytest tests/test_messages.py -v
"""

import pytest

from marketchat.application.commands.chat import (
    SendMessageCommand,
    SendMessageHandler,
)
from marketchat.application.queries.chat import (
    ListRoomMessagesHandler,
    ListRoomMessagesQuery,
)
from marketchat.domain.exceptions import (
    ChatRoomNotFoundError,
    EmptyContentError,
    SenderNotFoundError,
    SenderNotParticipantError,
)
from marketchat.domain.value_objects.chat_room_id import ChatRoomId
from tests.fakes import BUYER_ID, OUTSIDER_ID, SELLER_ID, external_id_of


@pytest.fixture()
def send(identity_resolver, room_repository, message_repository):
    return SendMessageHandler(identity_resolver, room_repository, message_repository)


@pytest.fixture()
def list_messages(room_repository, message_repository):
    return ListRoomMessagesHandler(room_repository, message_repository)


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_message_starts_unread(self, open_room, send):
        room = await open_room()
        message = await send.execute(SendMessageCommand(room.id, BUYER_ID, "Hello"))

        assert message.id is not None
        assert message.room_id == room.id
        assert message.sender_id.value == BUYER_ID
        assert message.content == "Hello"
        assert message.is_read is False

    @pytest.mark.asyncio
    async def test_content_is_stored_as_sent(self, open_room, send):
        room = await open_room()
        message = await send.execute(SendMessageCommand(room.id, BUYER_ID, "  hi there  "))

        assert message.content == "  hi there  "

    @pytest.mark.asyncio
    async def test_sender_may_use_external_id(self, open_room, send):
        room = await open_room()
        message = await send.execute(
            SendMessageCommand(room.id, external_id_of(SELLER_ID), "hi")
        )

        assert message.sender_id.value == SELLER_ID

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_rejected(self, open_room, send, store, content):
        room = await open_room()
        with pytest.raises(EmptyContentError):
            await send.execute(SendMessageCommand(room.id, BUYER_ID, content))
        assert store.messages == {}

    @pytest.mark.asyncio
    async def test_blank_content_checked_before_room(self, send):
        """Test that content validation comes first, even for a missing room."""
        with pytest.raises(EmptyContentError):
            await send.execute(SendMessageCommand(ChatRoomId(404), 999, " "))

    @pytest.mark.asyncio
    async def test_room_checked_before_sender(self, send):
        with pytest.raises(ChatRoomNotFoundError):
            await send.execute(SendMessageCommand(ChatRoomId(404), 999, "hi"))

    @pytest.mark.asyncio
    async def test_unknown_sender(self, open_room, send):
        room = await open_room()
        with pytest.raises(SenderNotFoundError):
            await send.execute(SendMessageCommand(room.id, 999, "hi"))

    @pytest.mark.asyncio
    async def test_third_party_cannot_post(self, open_room, send, store):
        room = await open_room()
        with pytest.raises(SenderNotParticipantError):
            await send.execute(SendMessageCommand(room.id, OUTSIDER_ID, "psst"))
        assert store.messages == {}


class TestListRoomMessages:
    @pytest.mark.asyncio
    async def test_alternating_senders_keep_arrival_order(self, open_room, send, list_messages):
        room = await open_room()
        contents = [f"message {i}" for i in range(10)]
        for i, content in enumerate(contents):
            sender = BUYER_ID if i % 2 == 0 else SELLER_ID
            await send.execute(SendMessageCommand(room.id, sender, content))

        messages = await list_messages.execute(ListRoomMessagesQuery(room_id=room.id))

        assert [m.content for m in messages] == contents
        assert [m.sort_key for m in messages] == sorted(m.sort_key for m in messages)

    @pytest.mark.asyncio
    async def test_empty_room(self, open_room, list_messages):
        room = await open_room()
        assert await list_messages.execute(ListRoomMessagesQuery(room_id=room.id)) == []

    @pytest.mark.asyncio
    async def test_listing_is_repeatable(self, open_room, send, list_messages):
        room = await open_room()
        await send.execute(SendMessageCommand(room.id, BUYER_ID, "once"))

        first = await list_messages.execute(ListRoomMessagesQuery(room_id=room.id))
        second = await list_messages.execute(ListRoomMessagesQuery(room_id=room.id))

        assert first == second

    @pytest.mark.asyncio
    async def test_returned_messages_are_snapshots(self, open_room, send, list_messages):
        """Test that mutating a returned message does not touch the stored log."""
        room = await open_room()
        await send.execute(SendMessageCommand(room.id, BUYER_ID, "hello"))
        (message,) = await list_messages.execute(ListRoomMessagesQuery(room_id=room.id))

        message.mark_read()

        (stored,) = await list_messages.execute(ListRoomMessagesQuery(room_id=room.id))
        assert stored.is_read is False

    @pytest.mark.asyncio
    async def test_missing_room(self, list_messages):
        with pytest.raises(ChatRoomNotFoundError):
            await list_messages.execute(ListRoomMessagesQuery(room_id=ChatRoomId(404)))
