"""
Database Module

Database connectivity and session management for BrainVault.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route / EmbeddingPipeline                                         │
│       │                                                                     │
│       │  app.state.database  (one Database per process)                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              AsyncSession (Database.get_session)            │          │
│   │  - One session per request / per background task           │          │
│   │  - Auto-commit on success, auto-rollback on exception       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   Repositories (UserRepository, ContentRepository, ShareLinkRepository)     │
│       │                                                                     │
│       ▼                                                                     │
│   PostgreSQL                                                                │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from brainvault.shared.db.session import Database

__all__ = [
    "Database",
]
