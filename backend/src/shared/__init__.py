"""
Shared Module

Contains the domain code used by the API:
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
    └── migrations/     ← Alembic environment and revisions

Usage:
======
    from src.shared.models import User, Link
    from src.shared.repositories import UserRepository, LinkRepository
    from src.shared.services import LinkService, ProfileService
    from src.shared.schemas import UserCreate, LinkCreate
    from src.shared.core import logger, LinkbioException
"""
