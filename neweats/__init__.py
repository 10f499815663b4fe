"""
NewEats Backend

Recipe and shopping-list REST backend.

Package Structure:
==================
    neweats/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn neweats.api.main:app --reload

    # Or directly
    python -m neweats.api.main
"""
