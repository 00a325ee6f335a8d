"""Application constants."""

# Listing endpoints (newest first)
LIST_PAGE_SIZE = 20

# Registration policy
MIN_PASSWORD_LENGTH = 8

# Access tokens: 128 random bytes rendered as hex
ACCESS_TOKEN_BYTES = 128
ACCESS_TOKEN_LENGTH = ACCESS_TOKEN_BYTES * 2

# Version of the error body returned in {"success": false, "response": ...}
ERROR_SCHEMA_VERSION = 1

ROOT_GREETING = "Hello plant lovers!"
