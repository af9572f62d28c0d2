"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): room get-or-create, send, mark-read, like/unlike
- queries/   → Read operations (CQRS): room detail, message log, room lists, likes
- services/  → Shared orchestration (identity resolution, reputation ledger)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, application services
"""
