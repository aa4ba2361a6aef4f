"""Server-wide constants."""

PROJECT_NAME = "Unthink"
API_V1_STR = "/api/v1"
VERSION = "1.0.0"
