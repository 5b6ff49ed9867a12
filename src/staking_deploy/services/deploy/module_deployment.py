# src/staking_deploy/services/deploy/module_deployment.py
import logging
from typing import Dict, Optional
from ...domain.models import ContractFuture, DeployedContract, Module, plain_args
from ...ports.artifact_store import ArtifactStore
from ...ports.chain_gateway import ChainGateway
from ...ports.journal import DeploymentJournal
from ...services.abi.constructor_encoder import encode_deploy_data
from ...errors import DeploymentRevertedError, NoAccountsError, ReconciliationError, RpcRequestError

class ModuleDeploymentService:
    def __init__(self, gateway: ChainGateway, artifacts: ArtifactStore, journal: DeploymentJournal):
        self.gateway = gateway
        self.artifacts = artifacts
        self.journal = journal

    def resolve_sender(self, sender: Optional[str] = None) -> str:
        if sender:
            return sender
        accounts = self.gateway.accounts()
        if not accounts:
            raise NoAccountsError("node returned no accounts; pass an explicit sender")
        return accounts[0]

    # ---------- one future ----------
    def deploy_future(self, fut: ContractFuture, sender: str) -> DeployedContract:
        prev = self.journal.load(fut.id)
        if prev is not None and not fut.force:
            if plain_args(prev.args) != plain_args(fut.args):
                raise ReconciliationError(
                    f"{fut.id}: args changed since deployment at {prev.address} "
                    f"(recorded {list(prev.args)!r}, now {list(fut.args)!r}); use force to redeploy"
                )
            logging.info("future=%s reused address=%s", fut.id, prev.address)
            return DeployedContract(
                future_id=prev.future_id, contract_name=prev.contract_name,
                address=prev.address, tx_hash=prev.tx_hash,
                block_number=prev.block_number, args=prev.args, reused=True,
            )

        artifact = self.artifacts.load(fut.contract_name)
        data = encode_deploy_data(artifact.bytecode, artifact.constructor_inputs(), fut.args)

        tx_hash = self.gateway.send_deployment(data, sender)
        logging.info("future=%s tx=%s sent", fut.id, tx_hash)
        receipt = self.gateway.wait_for_receipt(tx_hash)

        if _as_int(receipt.get("status")) != 1:
            raise DeploymentRevertedError(f"{fut.id}: constructor reverted (tx {tx_hash})")
        address = receipt.get("contractAddress")
        if not address:
            raise RpcRequestError(f"{fut.id}: receipt for {tx_hash} has no contractAddress")

        record = DeployedContract(
            future_id=fut.id,
            contract_name=fut.contract_name,
            address=address,
            tx_hash=tx_hash,
            block_number=_as_int(receipt.get("blockNumber")),
            args=fut.args,
        )
        self.journal.save(record)
        logging.info("future=%s address=%s", fut.id, address)
        return record

    # ---------- whole module ----------
    def deploy(self, module: Module, sender: Optional[str] = None) -> Dict[str, DeployedContract]:
        """Execute every future in registration order; return the module's results."""
        frm = self.resolve_sender(sender)
        deployed: Dict[str, DeployedContract] = {}
        for fut in module.futures:
            deployed[fut.id] = self.deploy_future(fut, frm)

        logging.info("module=%s futures=%d", module.id, len(deployed))
        return {name: deployed[fut.id] for name, fut in module.results.items()}


def _as_int(v) -> Optional[int]:
    # receipts carry quantities as hex strings
    if v is None:
        return None
    if isinstance(v, str):
        return int(v, 16) if v.startswith("0x") else int(v)
    return int(v)
