#!/usr/bin/env python3
"""
AshNFT Contract Deployment Script
Compile the contracts first with `npx hardhat compile`
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ashnft_deploy.cli import main
from ashnft_deploy.env_file import frontend_env_path_for_script

if __name__ == "__main__":
    sys.exit(main(default_env_file=frontend_env_path_for_script(__file__)))
