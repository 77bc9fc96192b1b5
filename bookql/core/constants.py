"""
Centralized constants for BookQL.

Every value reads from an environment variable with a hardcoded default,
so a local run needs zero configuration.
"""
import os

# --- API Version ---
API_VERSION = os.getenv("BOOKQL_API_VERSION", "1.0.0")

# --- Server ---
SERVER_HOST = os.getenv("BOOKQL_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("BOOKQL_PORT", "4000"))
GRAPHQL_PATH = "/graphql"

# --- Client ---
API_URL = os.getenv("BOOKQL_API_URL", "http://localhost:4000/graphql/")
HTTP_TIMEOUT = float(os.getenv("BOOKQL_HTTP_TIMEOUT", "30.0"))
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# --- CORS ---
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# --- Logging ---
LOG_LEVEL = os.getenv("BOOKQL_LOG_LEVEL", "INFO").upper()
