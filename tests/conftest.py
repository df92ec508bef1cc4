"""Shared fixtures for the deployment tests."""

import json

import pytest

from .fakes import ASHNFT_ABI, FakeWeb3


@pytest.fixture
def fake_web3():
    return FakeWeb3()


@pytest.fixture
def artifacts_dir(tmp_path):
    root = tmp_path / "artifacts"
    target = root / "contracts" / "AshNFT.sol"
    target.mkdir(parents=True)
    (target / "AshNFT.json").write_text(json.dumps({
        "_format": "hh-sol-artifact-1",
        "contractName": "AshNFT",
        "abi": ASHNFT_ABI,
        "bytecode": "0x6080604052",
    }))
    (target / "AshNFT.dbg.json").write_text(json.dumps({"buildInfo": "../../build-info/x.json"}))
    return root
