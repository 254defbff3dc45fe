"""
Data models for the tokenbound claimer.
"""
import re
from dataclasses import dataclass
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import to_bytes32

_BYTES32_RE = re.compile(r'^0x[0-9a-fA-F]{64}$')


class ClaimData(BaseModel):
    """Claim entry returned by the claim API for one account"""
    model_config = ConfigDict(extra="allow")

    index: int = Field(..., ge=0)
    amount: int = Field(..., ge=0)
    proof: List[str]

    @field_validator("index", "amount", mode="before")
    @classmethod
    def _parse_integer(cls, value: Any) -> Any:
        # Amounts arrive as decimal strings to keep full uint256 precision
        if isinstance(value, bool):
            raise ValueError("must be an integer, not a boolean")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"must be an integer, got {value}")
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text, 16) if text.lower().startswith("0x") else int(text)
            except ValueError:
                raise ValueError(f"not an integer: {value!r}")
        return value

    @field_validator("proof")
    @classmethod
    def _check_proof(cls, value: List[str]) -> List[str]:
        for position, node in enumerate(value):
            if not isinstance(node, str) or not _BYTES32_RE.match(node):
                raise ValueError(f"proof[{position}] is not a 32-byte hex string: {node!r}")
        return [node.lower() for node in value]

    def proof_bytes(self) -> List[bytes]:
        """Proof hashes as raw 32-byte values."""
        return [to_bytes32(node) for node in self.proof]


class ExecutionParams(BaseModel):
    """Call to be executed through a token-bound account"""
    model_config = ConfigDict(populate_by_name=True)

    account: str
    to: str
    value: int = 0
    data: str
    chain_id: int = Field(..., alias="chainId")


@dataclass
class ClaimResult:
    """
    Outcome of a claim run.

    Attributes:
        wallet_address: Address of the signing wallet
        account: Token-bound account the claim is made for
        claim_data: Claim entry returned by the claim API
        claim_call: Encoded ``claim`` calldata
        execution: Execution parameters for the destination chain
    """
    wallet_address: str
    account: str
    claim_data: ClaimData
    claim_call: str
    execution: ExecutionParams
