"""
Deployment configuration
Environment variables (optionally from a .env file) overridden by CLI flags
"""

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from ashnft_deploy.contract_integration import DEFAULT_RPC_URL

CONTRACT_NAME = "AshNFT"
DEFAULT_MAX_SUPPLY = 10000


@dataclass
class DeployConfig:
    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    owner: Optional[str] = None
    max_supply: int = DEFAULT_MAX_SUPPLY
    contract_name: str = CONTRACT_NAME
    artifacts_dir: Path = Path("artifacts")
    abi_path: Optional[Path] = None
    bytecode_path: Optional[Path] = None
    env_file: Optional[Path] = None
    update_env: bool = True
    strict: bool = False
    slack_webhook: Optional[str] = None
    log_file: Optional[str] = None


def parse_max_supply(value) -> int:
    try:
        max_supply = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid max supply: {value!r}")
    if max_supply < 0:
        raise ValueError(f"Max supply must not be negative: {max_supply}")
    return max_supply


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deploy the AshNFT contract")
    parser.add_argument("--rpc-url", help="JSON-RPC endpoint (RPC_URL)")
    parser.add_argument("--owner", help="Owner address passed to the constructor (defaults to the signer)")
    parser.add_argument("--max-supply", help=f"Maximum supply (default {DEFAULT_MAX_SUPPLY})")
    parser.add_argument("--artifacts-dir", help="Hardhat artifacts directory (ARTIFACTS_DIR)")
    parser.add_argument("--abi", help="ABI JSON file, used together with --bytecode instead of artifacts")
    parser.add_argument("--bytecode", help="Bytecode file, used together with --abi")
    parser.add_argument("--env-file", help="Frontend env file to update (FRONTEND_ENV_FILE)")
    parser.add_argument("--no-env-update", action="store_true", help="Do not touch the frontend env file")
    parser.add_argument("--strict", action="store_true",
                        help="Fail if the deployed contract state does not match the constructor arguments")
    parser.add_argument("--log-file", help="Also write logs to this file (LOG_FILE)")
    parser.add_argument("--dotenv", help="Path of a .env file to load before reading the environment")
    return parser


def load_config(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None,
                default_env_file: Optional[Path] = None) -> DeployConfig:
    """Build the deployment config from CLI arguments and the environment.

    ``default_env_file`` is supplied by the entry point; without one the
    frontend env file is looked up relative to the working directory.
    """
    args = build_parser().parse_args(argv)

    if env is None:
        load_dotenv(args.dotenv)
        env = os.environ

    if bool(args.abi) != bool(args.bytecode):
        raise ValueError("--abi and --bytecode must be given together")

    env_file = args.env_file or env.get("FRONTEND_ENV_FILE") or default_env_file

    return DeployConfig(
        rpc_url=args.rpc_url or env.get("RPC_URL") or DEFAULT_RPC_URL,
        private_key=env.get("PRIVATE_KEY") or None,
        owner=args.owner or env.get("ASHNFT_OWNER") or None,
        max_supply=parse_max_supply(
            args.max_supply if args.max_supply is not None
            else env.get("ASHNFT_MAX_SUPPLY", DEFAULT_MAX_SUPPLY)
        ),
        artifacts_dir=Path(args.artifacts_dir or env.get("ARTIFACTS_DIR") or "artifacts"),
        abi_path=Path(args.abi) if args.abi else None,
        bytecode_path=Path(args.bytecode) if args.bytecode else None,
        env_file=Path(env_file) if env_file else None,
        update_env=not args.no_env_update,
        strict=args.strict,
        slack_webhook=env.get("SLACK_WEBHOOK_URL") or None,
        log_file=args.log_file or env.get("LOG_FILE") or None,
    )
