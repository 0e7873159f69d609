"""
LionKing Deployer - Main Entry Point
Deploys the configured NFT contract once and exits 0 on success, 1 on failure
"""

import os
import sys
from typing import Optional
from loguru import logger

from deployer.config import load_config
from deployer.errors import ConfigError
from deployer.orchestrator import DeploymentOrchestrator


DEFAULT_LOG_FILE = "data/logs/deploy.log"


def configure_logging(level: str = "INFO", log_file: Optional[str] = DEFAULT_LOG_FILE):
    """Configure loguru sinks (stderr, plus a rotating file if log_file is set)"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def main(config_path: Optional[str] = None, log_file: Optional[str] = DEFAULT_LOG_FILE) -> int:
    """
    Run one deployment

    Returns:
        Process exit status
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"), log_file)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.opt(exception=e).error(f"Configuration error: {e}")
        return 1

    result = DeploymentOrchestrator(config).run()

    if not result.ok:
        logger.opt(exception=result.error).error(
            f"{type(result.error).__name__}: {result.error}"
        )
        if result.tx_hash:
            logger.error(f"Transaction hash: {result.tx_hash}")

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
