"""
Tailblocks

Marketplace for reusable UI components.

Package Structure:
==================
    tailblocks/
    ├── api/        ← FastAPI application
    ├── client/     ← HTTP client library and command line tool
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn tailblocks.api.main:app --reload --port 3000

    # Client
    TAILBLOCKS_API_URL=http://localhost:3000/api tailblocks list
"""

__version__ = "1.0.0"
