import json
from staking_deploy.adapters.journal.file_journal import FileJournal
from staking_deploy.domain.models import DeployedContract

def test_journal_persists_and_reloads(tmp_path):
    j = FileJournal(tmp_path, 31337)
    j.save(DeployedContract("StakingModule#Staking", "Staking", "0xabc", "0xtx", 7, (1, "0xtoken")))

    addresses = json.loads((tmp_path / "chain-31337" / "deployed_addresses.json").read_text())
    assert addresses == {"StakingModule#Staking": "0xabc"}

    again = FileJournal(tmp_path, 31337)
    rec = again.load("StakingModule#Staking")
    assert rec.address == "0xabc"
    assert rec.block_number == 7
    assert rec.args == (1, "0xtoken")

def test_journals_are_per_chain(tmp_path):
    FileJournal(tmp_path, 1).save(DeployedContract("M#A", "A", "0x1"))
    assert FileJournal(tmp_path, 2).load("M#A") is None
    assert FileJournal(tmp_path, 1).load("M#A").address == "0x1"

def test_bytes_args_stored_as_hex(tmp_path):
    FileJournal(tmp_path, 1).save(DeployedContract("M#A", "A", "0x1", args=(b"\x01\xff", 3)))
    raw = json.loads((tmp_path / "chain-1" / "journal.json").read_text())
    assert raw["M#A"]["args"] == ["0x01ff", 3]
    assert FileJournal(tmp_path, 1).load("M#A").args == ("0x01ff", 3)

def test_save_leaves_no_temp_files(tmp_path):
    j = FileJournal(tmp_path, 1)
    j.save(DeployedContract("M#A", "A", "0x1"))
    j.save(DeployedContract("M#B", "B", "0x2"))
    names = sorted(p.name for p in (tmp_path / "chain-1").iterdir())
    assert names == ["deployed_addresses.json", "journal.json"]
    assert FileJournal(tmp_path, 1).addresses() == {"M#A": "0x1", "M#B": "0x2"}
