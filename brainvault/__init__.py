"""
BrainVault Backend

Personal knowledge vault: save links, search them semantically, share a
read-only snapshot.

Package Structure:
==================
    brainvault/
    ├── api/        ← FastAPI application
    ├── worker/     ← Background embedding pipeline and backfill job
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn brainvault.api.main:app --reload

    # Embedding backfill
    python -m brainvault.worker.main
"""

__version__ = "1.0.0"
