"""
Linkbio Backend

Link-in-bio service: creator profiles with an ordered list of outbound links.

Package Structure:
==================
    src/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, schemas)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn src.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
