"""Configuration module for the Forum API.

This module provides centralized configuration management, including directory
paths, database and API server settings, and validation constants.
All configuration values can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = ROOT_DIR / DATA_DIR_NAME

# --- Database Configuration ---

# Any SQLAlchemy URL; PostgreSQL works as well as the SQLite default
DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/forum.db")

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "3000"))

# All resource routers are mounted below this prefix
API_PREFIX: str = "/api"

# CORS allowed origins (comma-separated list)
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv("CORS_ALLOWED_ORIGINS", "*")
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Authentication Configuration ---

# Bcrypt rounds for password hashing (higher = more secure but slower)
BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

# --- Validation Configuration ---

# Largest value of a signed 32-bit integer column
MAX_IDENTIFIER: int = 2147483647

# Email domains and the role each one grants at registration
STUDENT_EMAIL_DOMAIN: str = "student.ehb.be"
TEACHER_EMAIL_DOMAIN: str = "ehb.be"

USER_ROLES: List[str] = ["student", "teacher", "admin"]
