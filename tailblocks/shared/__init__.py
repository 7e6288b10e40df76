"""
Shared Module

Server-side code behind the API handlers:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Password hashing, JWT

Usage:
======
    from tailblocks.shared.models import User, Component
    from tailblocks.shared.repositories import ComponentRepository
    from tailblocks.shared.services import ComponentService
    from tailblocks.shared.schemas import ComponentCreate, ComponentListItem
    from tailblocks.shared.core import logger, TailblocksException
"""
