# scripts/deploy_module.py
import argparse, logging
from pathlib import Path

from staking_deploy.config import load_config
from staking_deploy.adapters.artifacts.hardhat_artifact_store import HardhatArtifactStore
from staking_deploy.adapters.chain.json_rpc_client import JsonRpcClient
from staking_deploy.adapters.chain.memory_gateway import MemoryChainGateway
from staking_deploy.adapters.chain.rpc_chain_gateway import RpcChainGateway
from staking_deploy.adapters.journal.file_journal import FileJournal
from staking_deploy.adapters.journal.memory_journal import MemoryJournal
from staking_deploy.modules.registry import available_modules
from staking_deploy.orchestrators.deploy_module_usecase import run
from staking_deploy.presenters.json_presenter import JsonPresenter
from staking_deploy.services.deploy.module_deployment import ModuleDeploymentService

def main():
    p = argparse.ArgumentParser(description="Deploy a contract module to a JSON-RPC node")
    p.add_argument("--module", help="Module id, e.g. StakingModule")
    p.add_argument("--list", action="store_true", help="List known modules and exit")
    p.add_argument("--rpc-url", default=None, help="Node URL (env RPC_URL)")
    p.add_argument("--artifacts-dir", default=None, help="Hardhat artifacts dir (env ARTIFACTS_DIR)")
    p.add_argument("--deployments-dir", default=None, help="Journal dir (env DEPLOYMENTS_DIR)")
    p.add_argument("--sender", default=None, help="Deployer address (env DEPLOYER_ADDRESS). Default=first node account")
    p.add_argument("--dry-run", action="store_true", help="Encode and record against an in-memory chain")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(message)s")

    if args.list:
        for name in available_modules():
            print(name)
        return
    if not args.module:
        p.error("--module is required")

    cfg = load_config(rpc_url=args.rpc_url, artifacts_dir=args.artifacts_dir,
                      deployments_dir=args.deployments_dir, deployer_address=args.sender)
    artifacts = HardhatArtifactStore(Path(cfg.artifacts_dir))
    print(f"[i] Deploying {args.module} via {'dry-run' if args.dry_run else cfg.rpc_url}")

    if args.dry_run:
        svc = ModuleDeploymentService(MemoryChainGateway(), artifacts, MemoryJournal())
        res = run(args.module, svc, cfg.deployer_address)
    else:
        with JsonRpcClient(cfg.rpc_url, timeout=cfg.rpc_timeout_sec) as client:
            gw = RpcChainGateway(client, retries=cfg.rpc_retries, timeout_sec=cfg.rpc_timeout_sec,
                                 receipt_timeout_sec=cfg.receipt_timeout_sec)
            journal = FileJournal(Path(cfg.deployments_dir), gw.chain_id())
            res = run(args.module, ModuleDeploymentService(gw, artifacts, journal), cfg.deployer_address)

    JsonPresenter().render(res)

if __name__ == "__main__":
    main()
