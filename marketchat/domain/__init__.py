"""
DOMAIN LAYER - The Heart of the Marketplace Core

This layer contains:
- Entities: Business objects with identity (User, Product, ChatRoom, Message, Like)
- Value Objects: Immutable identifier types (UserId, ChatRoomId, ProductId, ...)
- Ports: Interfaces/abstractions that infrastructure implements
- Services: Pure domain logic (no I/O), e.g. the reputation policy
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
