#!/usr/bin/env python3
# backend/run_backend.py
"""
Development server runner.

Uses the database configured by SPORTCLASS_DATABASE_URL (a local SQLite
file by default) and reloads on code changes.
"""
import os
from pathlib import Path
import sys

# Add backend to path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))
os.chdir(backend_dir)

os.environ.setdefault("SPORTCLASS_ENVIRONMENT", "development")

import uvicorn

from sportclass.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.api_title} ({settings.environment})")
    print(f"Database: {settings.database_url}")
    print("Access at: http://localhost:8000")
    print("API Docs: http://localhost:8000/docs")

    uvicorn.run(
        "sportclass.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
