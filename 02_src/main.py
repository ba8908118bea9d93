"""Main entry point for the wizard bot."""

import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from wizardbot import Application, BotConfig, ConfigError, __version__
from wizardbot.api import create_fastapi_app
from wizardbot.logging_config import get_logger, setup_logging

APP_NAME = "Telegram Minimax Bot"


def main() -> int:
    """Run the bot until SIGINT/SIGTERM."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    config = BotConfig.from_env()
    try:
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_level=config.log_level, log_file=config.log_file)
    logger = get_logger("wizardbot")
    logger.info("Starting %s v%s", APP_NAME, __version__)

    app = create_fastapi_app(Application(config))

    # uvicorn handles SIGINT/SIGTERM and runs the lifespan shutdown
    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
