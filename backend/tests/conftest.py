# backend/tests/conftest.py
"""
Pytest configuration shared by every test package.

Points the service at an in-memory database before any sportclass import so
no test can touch a real database file.
"""

import os
import sys

# Set testing mode BEFORE any sportclass imports
os.environ["SPORTCLASS_ENVIRONMENT"] = "test"
os.environ["SPORTCLASS_DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("SPORTCLASS_LOG_LEVEL", "WARNING")

# Add the backend directory to Python path so imports work
backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)
