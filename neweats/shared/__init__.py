"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions, authorization predicates
- Utils: Password hashing, tokens, SQL fragments

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions, authorization
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic migrations
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Utilities

Usage:
======
    from neweats.shared.models import User, Recipe
    from neweats.shared.repositories import UserRepository
    from neweats.shared.services import UserService
    from neweats.shared.schemas import UserRegister, TokenResponse
    from neweats.shared.core import logger, NewEatsException
"""
