"""
Centralised configuration for Postwoman.

Override via environment variables where noted.
"""

import os

# Storage
DATABASE_URL = os.getenv("POSTWOMAN_DATABASE_URL", "sqlite:///./postwoman.db")

# Logging
LOG_LEVEL = os.getenv("POSTWOMAN_LOG_LEVEL", "INFO").upper()

# CORS origins, comma separated
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("POSTWOMAN_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Outgoing requests always use a fixed timeout (seconds)
REQUEST_TIMEOUT = 30.0

# Collection export format written by this version
EXPORT_FORMAT_VERSION = "1.0"
