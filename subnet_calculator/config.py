"""
Runtime configuration management.

Handles loading and validating settings from environment variables. Values are
read on every call so tests and process startup see the current environment.

Environment Variables:
    SUBNET_CALCULATOR_PORT: TCP port to listen on (default: 8080)
    LOG_LEVEL: Logging level (default: INFO)
    CORS_ORIGINS: Comma-separated list of allowed CORS origins
                  If not set or empty, no cross-origin requests are allowed
"""

import os

VERSION = "1.0.0"

DEFAULT_PORT = 8080

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_port() -> int:
    """
    Get the listen port from environment.

    Returns:
        int: Port number (default: 8080)

    Raises:
        ValueError: If SUBNET_CALCULATOR_PORT is not a number in 1-65535
    """
    port_str = os.getenv("SUBNET_CALCULATOR_PORT", "").strip()

    if not port_str:
        return DEFAULT_PORT

    if not (port_str.isascii() and port_str.isdigit()):
        raise ValueError(f"Invalid port number: {port_str}")

    port = int(port_str)

    if not 1 <= port <= 65535:
        raise ValueError(f"Invalid port number: {port_str}")

    return port


def get_log_level() -> str:
    """
    Get the logging level from environment.

    Returns:
        str: Level name (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a known level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(VALID_LOG_LEVELS)}")

    return level


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        list[str]: Allowed origins (empty list if not configured)
    """
    origins_str = os.getenv("CORS_ORIGINS", "").strip()

    if not origins_str:
        return []

    # Split by comma and strip whitespace from each origin
    origins = [origin.strip() for origin in origins_str.split(",")]

    # Filter out empty strings after stripping
    return [origin for origin in origins if origin]


def validate_configuration():
    """
    Validate configuration at startup.

    Raises:
        ValueError: If configuration is invalid
    """
    get_port()
    get_log_level()
    get_cors_origins()
