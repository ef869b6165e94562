import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s RUN_DEV.PY - [%(levelname)s] - %(message)s'
)
logger = logging.getLogger("run_dev_script")


def main() -> None:
    """Run the tenant service API under uvicorn, reloading on change in debug mode."""
    dotenv_path = Path(__file__).parent.resolve() / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=True)
    else:
        logger.warning(f"No .env at {dotenv_path}; using OS environment and defaults.")

    # Imported after load_dotenv so the settings see the .env values
    from tenant_service.settings import settings

    host = os.getenv("DEV_SERVER_HOST", "127.0.0.1")
    port = int(os.getenv("DEV_SERVER_PORT", "8000"))

    logger.info(
        f"Starting {settings.app_name} on {host}:{port} "
        f"(backend: {settings.storage_backend}, reload: {settings.debug_mode})"
    )
    if settings.storage_backend == "cassandra":
        logger.info(
            f"Cassandra contact points: {settings.cassandra_contact_points}, "
            f"keyspace: '{settings.cassandra_keyspace}'"
        )

    uvicorn.run(
        "tenant_service.main:app",
        host=host,
        port=port,
        log_level="debug" if settings.debug_mode else "info",
        reload=settings.debug_mode
    )


if __name__ == "__main__":
    main()
