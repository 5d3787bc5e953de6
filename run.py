from tokensupply.settings import load_settings, setup_logging
from tokensupply.errors import ConfigurationError
from tokensupply.api.app import create_app
import logging
import sys
import uvicorn


def start_api_server():
    logger = logging.getLogger("[Main]")

    try:
        settings = load_settings()
    except ConfigurationError as e:
        # Refuse to start rather than fail while serving
        logging.basicConfig(level="ERROR")
        logger.error(e)
        sys.exit(1)

    setup_logging(settings)

    logger.info(f"Token supply API starting for {settings.token_address}...")
    app = create_app(settings)
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
    logger.info("Token supply API stopped!")


if __name__ == "__main__":
    start_api_server()
