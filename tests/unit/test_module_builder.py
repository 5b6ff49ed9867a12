import pytest
from staking_deploy.domain.module_builder import ModuleBuilder, build_module
from staking_deploy.errors import ModuleDefinitionError

def test_futures_keep_registration_order_and_args():
    def define(m):
        a = m.contract("A", [1, "x"])
        b = m.contract("B", force=True)
        return {"a": a, "b": b}
    mod = build_module("M", define)
    assert [f.id for f in mod.futures] == ["M#A", "M#B"]
    assert mod.futures[0].args == (1, "x")
    assert mod.futures[1].force is True
    assert mod.future("M#B").contract_name == "B"

def test_explicit_id_allows_same_contract_twice():
    def define(m):
        return {
            "one": m.contract("Token", [1]),
            "two": m.contract("Token", [2], id="Token2"),
        }
    mod = build_module("M", define)
    assert mod.results["two"].id == "M#Token2"

def test_duplicate_future_id_rejected():
    m = ModuleBuilder("M")
    m.contract("Token")
    with pytest.raises(ModuleDefinitionError):
        m.contract("Token")

def test_define_must_return_mapping():
    with pytest.raises(ModuleDefinitionError):
        build_module("M", lambda m: m.contract("A"))

def test_result_must_belong_to_module():
    other = ModuleBuilder("Other").contract("A")
    with pytest.raises(ModuleDefinitionError):
        build_module("M", lambda m: {"a": other})

def test_empty_module_id_rejected():
    with pytest.raises(ModuleDefinitionError):
        build_module("", lambda m: {})

def test_args_are_copied_into_tuple():
    args = [1, 2]
    mod = build_module("M", lambda m: {"a": m.contract("A", args)})
    args.append(3)
    assert mod.results["a"].args == (1, 2)
