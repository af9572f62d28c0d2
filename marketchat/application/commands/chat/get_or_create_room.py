"""
GetOrCreateChatRoom Command - Idempotent room lookup/creation for a
(buyer, seller, product) triple.

Handler:
1. Resolve buyer and seller through the IdentityResolver (distinct NotFound each)
2. Load product
3. Return the existing room for the triple, if any
4. Otherwise insert a new one

The existence check is only an optimisation. Two concurrent requests can both
miss it; the unique index makes the slower insert fail with
DuplicateChatRoomError, and we go back to step 3 instead of surfacing it.
"""

import logging
from dataclasses import dataclass

from marketchat.application.common.interfaces import Command, CommandHandler
from marketchat.application.services.identity_resolver import IdentityResolver
from marketchat.domain.entities.chat_room import ChatRoom
from marketchat.domain.exceptions import (
    BuyerNotFoundError,
    ConflictError,
    DuplicateChatRoomError,
    ProductNotFoundError,
    SellerNotFoundError,
)
from marketchat.domain.ports.repositories import ChatRoomRepository, ProductRepository
from marketchat.domain.value_objects.product_id import ProductId
from marketchat.observability.metrics import RoomOutcome, increment_chat_room

logger = logging.getLogger(__name__)


@dataclass
class GetOrCreateChatRoomResult:
    room: ChatRoom
    created: bool


@dataclass(frozen=True)
class GetOrCreateChatRoomCommand(Command[GetOrCreateChatRoomResult]):
    buyer_id: int  # internal or external id
    seller_id: int  # internal or external id
    product_id: ProductId


class GetOrCreateChatRoomHandler(CommandHandler[GetOrCreateChatRoomResult]):
    def __init__(
        self,
        identity_resolver: IdentityResolver,
        room_repository: ChatRoomRepository,
        product_repository: ProductRepository,
        max_attempts: int = 3,
    ):
        self._identity = identity_resolver
        self._room_repository = room_repository
        self._product_repository = product_repository
        self._max_attempts = max(1, max_attempts)

    async def execute(
        self, command: GetOrCreateChatRoomCommand
    ) -> GetOrCreateChatRoomResult:
        buyer = await self._identity.require(command.buyer_id, BuyerNotFoundError)
        seller = await self._identity.require(command.seller_id, SellerNotFoundError)
        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError(command.product_id.value)

        for attempt in range(1, self._max_attempts + 1):
            existing = await self._room_repository.get_by_participants(
                buyer.id, seller.id, product.id
            )
            if existing:
                increment_chat_room(RoomOutcome.EXISTING)
                return GetOrCreateChatRoomResult(room=existing, created=False)

            try:
                room = await self._room_repository.add(
                    ChatRoom.open(buyer.id, seller.id, product.id)
                )
            except DuplicateChatRoomError:
                logger.info(
                    f"Room insert for buyer={buyer.id.value}, seller={seller.id.value}, "
                    f"product={product.id.value} lost a race (attempt {attempt}), re-reading"
                )
                continue

            increment_chat_room(RoomOutcome.CREATED)
            logger.info(
                f"Chat room {room.id.value} created: buyer={buyer.id.value}, "
                f"seller={seller.id.value}, product={product.id.value}"
            )
            return GetOrCreateChatRoomResult(room=room, created=True)

        # Only reachable if the winning row keeps disappearing between our insert and re-read
        raise ConflictError(
            f"Could not settle chat room for buyer={buyer.id.value}, "
            f"seller={seller.id.value}, product={product.id.value} "
            f"after {self._max_attempts} attempts"
        )
