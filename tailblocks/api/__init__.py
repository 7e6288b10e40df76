"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Database, auth gate, query parsing, services
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handlers, request log context

Usage:
======
    # Run the API
    uvicorn tailblocks.api.main:app --reload --port 3000

    # Import the app
    from tailblocks.api.main import app, create_application
"""
