"""
Frontend env file updater
Writes the deployed contract address into the frontend's .env.local
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

ADDRESS_ENV_KEY = "NEXT_PUBLIC_ASHNFT_ADDRESS_LOCAL"

FRONTEND_ENV_NAME = Path("frontend") / ".env.local"


def frontend_env_path_for_script(script_path: Union[str, Path]) -> Path:
    """<repo>/contracts/scripts/deploy.py -> <repo>/frontend/.env.local"""
    return Path(script_path).resolve().parent.parent.parent / FRONTEND_ENV_NAME


def frontend_env_path_for_cwd() -> Path:
    """Run from <repo>/contracts (where artifacts/ lives) -> <repo>/frontend/.env.local"""
    return Path.cwd().resolve().parent / FRONTEND_ENV_NAME


def update_env_content(content: str, key: str, value: str) -> str:
    """Return ``content`` with ``key=value`` replacing the first ``key=`` line.

    When no line starts with ``key=`` the pair is appended on its own line,
    adding a newline to the previous last line if it lacks one.
    """
    line = f"{key}={value}"
    pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)

    if pattern.search(content):
        return pattern.sub(lambda _: line, content, count=1)

    if content and not content.endswith("\n"):
        content += "\n"
    return content + line + "\n"


def read_env_file(path: Union[str, Path]) -> Optional[str]:
    path = Path(path)
    if not path.exists():
        logger.info(f"No existing {path.name} found, a new file will be created")
        return None

    logger.info(f"Found existing {path.name}")
    # newline="" keeps CRLF files intact on the way back out
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_env_file(path: Union[str, Path], content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def update_env_file(path: Union[str, Path], key: str, value: str) -> bool:
    """Replace or append ``key=value`` in ``path``.

    Failures are logged and reported through the return value only.
    """
    try:
        content = read_env_file(path) or ""
        write_env_file(path, update_env_content(content, key, value))
        logger.info(f"Updated {key} in {path}")
        return True
    except (OSError, UnicodeError) as e:
        logger.error(f"Error updating {path}: {e}")
        return False


def update_frontend_env_file(address: str, env_path: Optional[Union[str, Path]] = None) -> bool:
    path = Path(env_path) if env_path else frontend_env_path_for_cwd()
    return update_env_file(path, ADDRESS_ENV_KEY, address)
