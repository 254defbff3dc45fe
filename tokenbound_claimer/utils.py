"""
Utility functions for the tokenbound claimer.
"""
import urllib.parse
from typing import Any, Dict, Sequence, Union

from eth_abi import encode as abi_encode
from eth_utils import to_checksum_address
from web3 import Web3


def validate_url(name: str, url: str, require_https: bool = True) -> str:
    """
    Ensure a URL has a host and, unless told otherwise, uses https.

    Plain http is always allowed for localhost and 127.0.0.1.

    Args:
        name: Setting name used in the error message
        url: URL to check
        require_https: Reject non-https URLs that are not local

    Returns:
        The URL unchanged

    Raises:
        ValueError: If the URL has no host, or is not https when required
    """
    parsed = urllib.parse.urlparse(url)
    # Check if it's a localhost or 127.0.0.1 address (with or without port)
    netloc_parts = parsed.netloc.split(':')
    host = netloc_parts[0] if netloc_parts else ''
    is_local = host in ('localhost', '127.0.0.1')
    if require_https and parsed.scheme != 'https' and not is_local:
        raise ValueError(f"{name} must use https:// for security (got: {parsed.scheme}://)")
    if not host:
        raise ValueError(f"{name} is missing a host (got: {url!r})")
    return url


def create2_address(deployer: str, salt: bytes, init_code: bytes) -> str:
    """
    Address of a contract deployed with CREATE2 (EIP-1014).

    Args:
        deployer: Address of the deploying contract
        salt: 32-byte salt
        init_code: Contract creation code

    Returns:
        Checksum address
    """
    if len(salt) != 32:
        raise ValueError(f"salt must be 32 bytes, got {len(salt)}")
    digest = Web3.keccak(
        b"\xff"
        + bytes.fromhex(to_checksum_address(deployer)[2:])
        + salt
        + Web3.keccak(init_code)
    )
    return to_checksum_address(bytes(digest[12:]))


def function_signature(fn_abi: Dict[str, Any]) -> str:
    """Canonical signature of an ABI function entry, e.g. ``claim(uint256,address)``."""
    types = ",".join(inp["type"] for inp in fn_abi.get("inputs", []))
    return f"{fn_abi['name']}({types})"


def function_selector(fn_abi: Dict[str, Any]) -> bytes:
    """First four bytes of the keccak hash of the function signature."""
    return bytes(Web3.keccak(text=function_signature(fn_abi))[:4])


def encode_function_call(fn_abi: Dict[str, Any], args: Sequence[Any]) -> str:
    """
    Encode a contract call as 0x-prefixed calldata.

    Args:
        fn_abi: ABI entry of the function being called
        args: Positional arguments, in ABI order

    Returns:
        Hex string with selector followed by ABI-encoded arguments
    """
    types = [inp["type"] for inp in fn_abi.get("inputs", [])]
    if len(types) != len(args):
        raise ValueError(
            f"{fn_abi['name']} expects {len(types)} arguments, got {len(args)}"
        )
    payload = function_selector(fn_abi) + abi_encode(types, list(args))
    return "0x" + payload.hex()


def to_bytes32(value: Union[str, bytes]) -> bytes:
    """
    Convert a hex string or bytes into exactly 32 bytes.

    Raises:
        ValueError: If the value is not 32 bytes long
    """
    if isinstance(value, str):
        if value.startswith(('0x', '0X')):
            value = value[2:]
        value = bytes.fromhex(value)
    if len(value) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(value)}")
    return value
