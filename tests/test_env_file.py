from pathlib import Path

from ashnft_deploy import env_file
from ashnft_deploy.env_file import (
    ADDRESS_ENV_KEY,
    frontend_env_path_for_cwd,
    frontend_env_path_for_script,
    update_env_content,
    update_env_file,
    update_frontend_env_file,
)

KEY = ADDRESS_ENV_KEY


def test_empty_content_gets_single_line():
    assert update_env_content("", KEY, "0xABC") == f"{KEY}=0xABC\n"


def test_existing_key_is_replaced_in_place():
    content = f"FOO=1\n{KEY}=0xOLD\nBAR=2\n"

    assert update_env_content(content, KEY, "0xNEW") == f"FOO=1\n{KEY}=0xNEW\nBAR=2\n"


def test_replaced_line_discards_anything_after_key():
    content = f"{KEY}=0xOLD # deployed yesterday\nBAR=2"

    assert update_env_content(content, KEY, "0xNEW") == f"{KEY}=0xNEW\nBAR=2"


def test_only_first_matching_line_is_replaced():
    content = f"{KEY}=0x1\n{KEY}=0x2\n"

    assert update_env_content(content, KEY, "0xNEW") == f"{KEY}=0xNEW\n{KEY}=0x2\n"


def test_missing_key_is_appended_after_newline():
    assert update_env_content("FOO=1", KEY, "0xABC") == f"FOO=1\n{KEY}=0xABC\n"
    assert update_env_content("FOO=1\n", KEY, "0xABC") == f"FOO=1\n{KEY}=0xABC\n"


def test_key_must_start_the_line():
    content = f"OTHER_{KEY}=0xOLD\n"

    assert update_env_content(content, KEY, "0xNEW") == f"OTHER_{KEY}=0xOLD\n{KEY}=0xNEW\n"


def test_crlf_line_endings_are_kept():
    content = f"FOO=1\r\n{KEY}=0xOLD\r\nBAR=2\r\n"

    assert update_env_content(content, KEY, "0xNEW") == f"FOO=1\r\n{KEY}=0xNEW\r\nBAR=2\r\n"


def test_value_with_backslashes_is_written_literally():
    assert update_env_content(f"{KEY}=x\n", KEY, r"a\1b") == f"{KEY}=a\\1b\n"


def test_update_is_idempotent():
    for content in ("", "FOO=1", f"FOO=1\n{KEY}=0xOLD\nBAR=2\n"):
        once = update_env_content(content, KEY, "0xNEW")
        assert update_env_content(once, KEY, "0xNEW") == once


def test_update_env_file_creates_missing_file(tmp_path):
    path = tmp_path / ".env.local"

    assert update_env_file(path, KEY, "0xABC") is True
    assert path.read_bytes() == f"{KEY}=0xABC\n".encode()


def test_update_env_file_rewrites_existing_file(tmp_path):
    path = tmp_path / ".env.local"
    path.write_bytes(f"FOO=1\n{KEY}=0xOLD\nBAR=2\n".encode())

    assert update_env_file(path, KEY, "0xNEW") is True
    assert path.read_bytes() == f"FOO=1\n{KEY}=0xNEW\nBAR=2\n".encode()

    first = path.read_bytes()
    update_env_file(path, KEY, "0xNEW")
    assert path.read_bytes() == first


def test_update_env_file_logs_and_swallows_errors(tmp_path, caplog):
    path = tmp_path / "missing-dir" / ".env.local"

    assert update_env_file(path, KEY, "0xABC") is False
    assert not path.exists()
    assert "Error updating" in caplog.text


def test_script_default_is_two_levels_above_scripts_dir(tmp_path):
    script = tmp_path / "contracts" / "scripts" / "deploy_ashnft.py"

    assert frontend_env_path_for_script(script) == tmp_path.resolve() / "frontend" / ".env.local"


def test_bundled_script_default_sits_beside_the_checkout():
    repo_root = Path(__file__).resolve().parent.parent
    script = repo_root / "scripts" / "deploy_ashnft.py"

    assert frontend_env_path_for_script(script) == repo_root.parent / "frontend" / ".env.local"


def test_default_without_script_follows_working_directory(tmp_path, monkeypatch):
    contracts = tmp_path / "contracts"
    contracts.mkdir()
    target = tmp_path / "frontend" / ".env.local"
    target.parent.mkdir()
    monkeypatch.chdir(contracts)

    assert frontend_env_path_for_cwd() == target.resolve()
    package_dir = Path(env_file.__file__).resolve().parent
    assert package_dir not in frontend_env_path_for_cwd().parents

    assert update_frontend_env_file("0xABC") is True
    assert target.read_text() == f"{KEY}=0xABC\n"


def test_frontend_env_path_override(tmp_path):
    target = tmp_path / "custom.env"

    assert update_frontend_env_file("0xABC", target) is True
    assert target.read_text() == f"{KEY}=0xABC\n"
