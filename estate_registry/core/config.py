import os


class Settings:
    # API
    API_V1_STR = os.getenv("API_V1_STR", "/api/v1")
    PROJECT_NAME = os.getenv("PROJECT_NAME", "Estate Document Registry API")
    VERSION = "1.0.0"

    # CORS
    ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

    # Caller identity is supplied by the host in this header
    CALLER_HEADER = os.getenv("CALLER_HEADER", "X-Caller")

    # Height source: "local" counter, or a web3 network reached through RPC_URL
    NETWORK = os.getenv("NETWORK", "local").lower()
    RPC_URL = os.getenv("RPC_URL") or os.getenv(f"{NETWORK.upper()}_RPC_URL")

    # Document limits
    TITLE_MAX_LENGTH = 64
    DESCRIPTION_MAX_LENGTH = 128
    MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", 1_000_000_000))  # exclusive ceiling
    MAX_TAGS = 10
    TAG_MAX_LENGTH = 32

    # Storage map names
    DOCUMENTS_MAP = "estate-documents"
    PERMISSIONS_MAP = "viewer-permissions"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "estate_registry.log")


# Create settings instance
settings = Settings()
