"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Database, owner gate, services
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handlers, authentication, request logging

Usage:
======
    # Run the API
    uvicorn neweats.api.main:app --reload

    # Import the app
    from neweats.api.main import app, create_application
"""
