"""
Shared Module

Contains code shared between the API and the worker:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: Embedding provider and vector index clients

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database handle and sessions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Security helpers
"""
