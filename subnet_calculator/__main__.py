"""Process entry point: ``python -m subnet_calculator`` or ``subnet-calculator``.

Configures logging, validates configuration and serves the application on
Uvicorn at the port from SUBNET_CALCULATOR_PORT (default 8080).
"""

import logging
import sys
from datetime import datetime, timezone

import uvicorn

from .config import get_log_level, get_port, validate_configuration
from .main import create_app

logger = logging.getLogger("subnet_calculator")


def main():
    """Validate configuration and start the server."""
    started_at = datetime.now(timezone.utc)

    try:
        validate_configuration()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Configuration error: {e}")
        raise SystemExit(1) from e

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    port = get_port()

    print(f"IPv4 Subnet Calculator starting on http://localhost:{port}", flush=True)
    print(f"Health check available at http://localhost:{port}/health", flush=True)

    uvicorn.run(
        create_app(started_at=started_at),
        host="0.0.0.0",
        port=port,
        log_level=get_log_level().lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
