"""
Prisma User Repository Implementation.

Mapping:
- Prisma model fields: id, external_id, display_name, avatar_url,
  reputation_score, created_at, updated_at
- Domain entity: User with value objects (UserId, ExternalId)

Reputation updates run as one raw UPDATE ... RETURNING so the clamp happens
inside the row lock Postgres takes for the update. Concurrent likes on the
same seller serialize on that row instead of overwriting each other.
"""

from typing import Optional, TYPE_CHECKING
from marketchat.domain.entities.user import User
from marketchat.domain.ports.repositories import UserRepository
from marketchat.domain.value_objects.external_id import ExternalId
from marketchat.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import User as PrismaUser

_ADJUST_REPUTATION_SQL = """
UPDATE "users"
SET "reputation_score" = LEAST(
        CAST($3 AS DOUBLE PRECISION),
        GREATEST(
            CAST($2 AS DOUBLE PRECISION),
            CAST(
                ROUND(CAST("reputation_score" + CAST($1 AS DOUBLE PRECISION) AS NUMERIC), 1)
                AS DOUBLE PRECISION
            )
        )
    ),
    "updated_at" = NOW()
WHERE "id" = $4
RETURNING "reputation_score"
"""

# users.id is INT4; larger raw ids can only be external ids
_MAX_INTERNAL_ID = 2**31 - 1
# users.external_id is BIGINT; nothing above it can be stored
_MAX_EXTERNAL_ID = 2**63 - 1


class PrismaUserRepository(UserRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: "PrismaUser") -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            external_id=ExternalId(record.external_id),
            display_name=record.display_name,
            reputation_score=record.reputation_score,
            avatar_url=record.avatar_url,
            created_at=record.created_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        if user_id.value > _MAX_INTERNAL_ID:
            return None
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        if external_id.value > _MAX_EXTERNAL_ID:
            return None
        record = await self._prisma.user.find_unique(
            where={"external_id": external_id.value}
        )
        return self._to_entity(record) if record else None

    async def adjust_reputation(
        self, user_id: UserId, delta: float, floor: float, ceiling: float
    ) -> Optional[float]:
        row = await self._prisma.query_first(
            _ADJUST_REPUTATION_SQL, delta, floor, ceiling, user_id.value
        )
        if not row:
            return None
        return float(row["reputation_score"])
