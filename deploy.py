"""
ChainGallery Deployment
Deploys the ChainGallery contract and prints its address
"""

import asyncio
import os
import sys
from typing import Optional
from loguru import logger

from deployer.runtime import DeploymentRuntime

CONTRACT_NAME = "ChainGallery"


def configure_logging():
    """Send logs to stderr (and optionally a file) so stdout only carries the result"""
    level = os.getenv('DEPLOY_LOG_LEVEL', 'INFO').upper()
    unknown_level = None
    try:
        logger.level(level)
    except ValueError:
        unknown_level, level = level, 'INFO'

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )

    if unknown_level:
        logger.warning(f"Unknown DEPLOY_LOG_LEVEL '{unknown_level}', using INFO")

    log_file = os.getenv('DEPLOY_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


async def main(runtime: Optional[DeploymentRuntime] = None) -> str:
    """
    Deploy ChainGallery and wait for it to be mined

    Args:
        runtime: Deployment runtime (None = build from environment)

    Returns:
        Deployed contract address
    """
    if runtime is None:
        runtime = DeploymentRuntime.from_env()

    factory = runtime.get_contract_factory(CONTRACT_NAME)
    chain_gallery = await factory.deploy()

    await chain_gallery.deployed()

    print(f"{CONTRACT_NAME} contract deployed to: {chain_gallery.address}")
    return chain_gallery.address


def run(runtime: Optional[DeploymentRuntime] = None) -> int:
    """
    Run one deployment

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    configure_logging()

    try:
        asyncio.run(main(runtime))
    except KeyboardInterrupt:
        logger.warning("Deployment interrupted")
        return 1
    except Exception as e:
        logger.error(f"Deployment failed: {e}")
        logger.opt(exception=e).debug("Traceback")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())
