# tests/unit/test_entrypoints.py
import json
import runpy
import sys
from pathlib import Path
import pytest
from staking_deploy import app
from staking_deploy.adapters.chain.json_rpc_client import JsonRpcClient
from staking_deploy.presenters.json_presenter import JsonPresenter

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "deploy_module.py"
ACCOUNT = "0x" + "aa" * 20

class FakeResp:
    def __init__(self, status, payload):
        self.status_code = status
        self.text = json.dumps(payload)

class FakeNode(JsonRpcClient):
    """Answers just enough JSON-RPC to deploy one contract."""
    calls = []

    def __init__(self, url, timeout=15.0):
        self.url = url

    def request(self, method, params=None, timeout=None):
        FakeNode.calls.append(method)
        results = {
            "eth_chainId": "0x7a69",
            "eth_accounts": [ACCOUNT],
            "eth_estimateGas": "0x5208",
            "eth_sendTransaction": "0x" + "11" * 32,
            "eth_getTransactionReceipt": {
                "status": "0x1", "contractAddress": "0x" + "cc" * 20, "blockNumber": "0x5",
            },
        }
        return FakeResp(200, {"jsonrpc": "2.0", "id": 1, "result": results[method]})

    def close(self):
        pass

def _token_a_artifacts(tmp_path):
    d = tmp_path / "artifacts" / "contracts" / "TokenA.sol"
    d.mkdir(parents=True)
    (d / "TokenA.json").write_text(json.dumps({"contractName": "TokenA", "abi": [], "bytecode": "0x6080"}))
    return tmp_path / "artifacts"

def test_lambda_handler_deploys_over_rpc_and_journals_per_chain(monkeypatch, tmp_path):
    FakeNode.calls = []
    monkeypatch.setattr(app, "JsonRpcClient", FakeNode)
    monkeypatch.setenv("ARTIFACTS_DIR", str(_token_a_artifacts(tmp_path)))
    monkeypatch.setenv("DEPLOYMENTS_DIR", str(tmp_path / "deployments"))
    monkeypatch.delenv("DEPLOYER_ADDRESS", raising=False)

    out = app.lambda_handler({"module": "TokenAModule"})
    body = json.loads(out["body"])
    assert body["dry_run"] is False
    assert body["contracts"]["tokenA"]["address"] == "0x" + "cc" * 20
    assert body["contracts"]["tokenA"]["block_number"] == 5

    saved = json.loads((tmp_path / "deployments" / "chain-31337" / "deployed_addresses.json").read_text())
    assert saved == {"TokenAModule#TokenA": "0x" + "cc" * 20}
    assert FakeNode.calls == [
        "eth_chainId", "eth_accounts", "eth_estimateGas",
        "eth_sendTransaction", "eth_getTransactionReceipt",
    ]

def test_json_presenter_prints_result(capsys):
    JsonPresenter().render({"module": "TokenAModule", "contracts": {}})
    assert json.loads(capsys.readouterr().out) == {"module": "TokenAModule", "contracts": {}}

def _run_script(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *argv])
    runpy.run_path(str(SCRIPT), run_name="__main__")

def test_script_lists_modules(monkeypatch, capsys):
    _run_script(monkeypatch, "--list")
    assert capsys.readouterr().out.split() == ["StakingModule", "TokenAModule"]

def test_script_dry_run_prints_summary(monkeypatch, capsys, tmp_path):
    monkeypatch.delenv("DEPLOYER_ADDRESS", raising=False)
    _run_script(monkeypatch, "--module", "TokenAModule", "--dry-run",
                "--artifacts-dir", str(_token_a_artifacts(tmp_path)))
    out = capsys.readouterr().out
    header, summary = out.split("\n", 1)
    assert header.startswith("[i] Deploying TokenAModule via dry-run")
    res = json.loads(summary)
    assert res["module"] == "TokenAModule"
    assert res["contracts"]["tokenA"]["future_id"] == "TokenAModule#TokenA"

def test_script_requires_module(monkeypatch):
    with pytest.raises(SystemExit):
        _run_script(monkeypatch)
