# src/staking_deploy/services/abi/constructor_encoder.py
import re
from typing import Any, Dict, List, Sequence, Tuple
from ...errors import AbiEncodingError

_WORD = 32
_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_INT_RE = re.compile(r"^(u?int)(\d*)$")
_BYTES_RE = re.compile(r"^bytes(\d+)$")

def _is_dynamic(typ: str) -> bool:
    return typ in ("string", "bytes")

def _pad_right(b: bytes) -> bytes:
    rem = len(b) % _WORD
    return b if rem == 0 else b + b"\x00" * (_WORD - rem)

def _as_int(value: Any, typ: str) -> int:
    if isinstance(value, bool):
        raise AbiEncodingError(f"{typ}: got bool {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError:
            pass
    raise AbiEncodingError(f"{typ}: cannot encode {value!r}")

def _encode_int(value: Any, typ: str) -> bytes:
    m = _INT_RE.match(typ)
    kind, bits = m.group(1), int(m.group(2) or 256)
    if bits % 8 or not 8 <= bits <= 256:
        raise AbiEncodingError(f"unsupported type {typ}")
    n = _as_int(value, typ)
    if kind == "uint":
        if not 0 <= n < 2 ** bits:
            raise AbiEncodingError(f"{typ}: {n} out of range")
        return n.to_bytes(_WORD, "big")
    if not -(2 ** (bits - 1)) <= n < 2 ** (bits - 1):
        raise AbiEncodingError(f"{typ}: {n} out of range")
    return n.to_bytes(_WORD, "big", signed=True)

def _encode_address(value: Any) -> bytes:
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        raise AbiEncodingError(f"address: cannot encode {value!r}")
    return bytes.fromhex(value[2:]).rjust(_WORD, b"\x00")

def _encode_fixed_bytes(value: Any, typ: str) -> bytes:
    size = int(_BYTES_RE.match(typ).group(1))
    if not 1 <= size <= 32:
        raise AbiEncodingError(f"unsupported type {typ}")
    raw = _as_bytes(value, typ)
    if len(raw) > size:
        raise AbiEncodingError(f"{typ}: {len(raw)} bytes given")
    return raw.ljust(_WORD, b"\x00")

def _as_bytes(value: Any, typ: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str) and value.startswith("0x"):
        try:
            return bytes.fromhex(value[2:])
        except ValueError:
            pass
    raise AbiEncodingError(f"{typ}: cannot encode {value!r}")

def encode_value(typ: str, value: Any) -> bytes:
    """Encode a single value; dynamic types return their tail (length + data)."""
    if value is None:
        raise AbiEncodingError(f"{typ}: missing value")
    if _INT_RE.match(typ):
        return _encode_int(value, typ)
    if typ == "address":
        return _encode_address(value)
    if typ == "bool":
        if not isinstance(value, bool):
            raise AbiEncodingError(f"bool: cannot encode {value!r}")
        return int(value).to_bytes(_WORD, "big")
    if _BYTES_RE.match(typ):
        return _encode_fixed_bytes(value, typ)
    if typ == "bytes":
        raw = _as_bytes(value, typ)
        return len(raw).to_bytes(_WORD, "big") + _pad_right(raw)
    if typ == "string":
        if not isinstance(value, str):
            raise AbiEncodingError(f"string: cannot encode {value!r}")
        raw = value.encode("utf-8")
        return len(raw).to_bytes(_WORD, "big") + _pad_right(raw)
    raise AbiEncodingError(f"unsupported type {typ}")

def encode_arguments(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """Standard head/tail encoding of a flat argument list."""
    if len(types) != len(values):
        raise AbiEncodingError(f"expected {len(types)} arguments, got {len(values)}")

    heads: List[bytes] = []
    tails: List[bytes] = []
    head_size = _WORD * len(types)
    offset = head_size
    for typ, val in zip(types, values):
        enc = encode_value(typ, val)
        if _is_dynamic(typ):
            heads.append(offset.to_bytes(_WORD, "big"))
            tails.append(enc)
            offset += len(enc)
        else:
            heads.append(enc)
    return b"".join(heads) + b"".join(tails)

def constructor_types(inputs: List[Dict[str, Any]]) -> Tuple[str, ...]:
    return tuple(str(i.get("type")) for i in inputs)

def encode_deploy_data(bytecode: str, inputs: List[Dict[str, Any]], args: Sequence[Any]) -> str:
    """Creation code followed by the ABI-encoded constructor arguments, 0x-hex."""
    encoded = encode_arguments(constructor_types(inputs), args)
    code = bytecode[2:] if bytecode.startswith("0x") else bytecode
    return "0x" + code + encoded.hex()
