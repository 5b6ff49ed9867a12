import json, logging
from pathlib import Path
from .config import load_config
from .adapters.artifacts.hardhat_artifact_store import HardhatArtifactStore
from .adapters.chain.json_rpc_client import JsonRpcClient
from .adapters.chain.memory_gateway import MemoryChainGateway
from .adapters.chain.rpc_chain_gateway import RpcChainGateway
from .adapters.journal.file_journal import FileJournal
from .adapters.journal.memory_journal import MemoryJournal
from .services.deploy.module_deployment import ModuleDeploymentService
from .orchestrators.deploy_module_usecase import run

def _build_service(cfg, gateway, dry_run: bool) -> ModuleDeploymentService:
    artifacts = HardhatArtifactStore(Path(cfg.artifacts_dir))
    if dry_run:
        journal = MemoryJournal()
    else:
        journal = FileJournal(Path(cfg.deployments_dir), gateway.chain_id())
    return ModuleDeploymentService(gateway, artifacts, journal)

def lambda_handler(event, _context=None):
    """
    event:
      {
        "module": "StakingModule",
        "dry_run": false,
        "sender": null
      }
    """
    cfg = load_config()
    module_id = event["module"]
    dry_run = bool(event.get("dry_run"))
    sender = event.get("sender") or cfg.deployer_address

    if dry_run:
        res = run(module_id, _build_service(cfg, MemoryChainGateway(), True), sender)
    else:
        with JsonRpcClient(cfg.rpc_url, timeout=cfg.rpc_timeout_sec) as client:
            gateway = RpcChainGateway(
                client,
                retries=cfg.rpc_retries,
                timeout_sec=cfg.rpc_timeout_sec,
                receipt_timeout_sec=cfg.receipt_timeout_sec,
            )
            res = run(module_id, _build_service(cfg, gateway, False), sender)

    return {"statusCode": 200, "body": json.dumps({
        "dry_run": dry_run,
        **res
    }, ensure_ascii=False, default=str)}

if __name__ == "__main__":
    # local run: pipe the JSON event to stdin
    import sys
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    payload = json.loads(sys.stdin.read())
    out = lambda_handler(payload, None)
    print(out["body"])
