"""
AshNFT deployment entry point
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ashnft_deploy.config import load_config
from ashnft_deploy.deployer import AshNFTDeployer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_file: Optional[str] = None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)


async def deploy(argv: Optional[List[str]] = None, default_env_file: Optional[Path] = None):
    config = load_config(argv, default_env_file=default_env_file)
    configure_logging(config.log_file)
    return await AshNFTDeployer(config).run()


def main(argv: Optional[List[str]] = None, default_env_file: Optional[Path] = None) -> int:
    """Run the deployment, returning the process exit code"""
    try:
        asyncio.run(deploy(argv, default_env_file))
        return 0
    except KeyboardInterrupt:
        logger.info("Deployment interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Deployment failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
