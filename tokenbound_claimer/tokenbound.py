"""
TokenboundClient - chain client for ERC-6551 token-bound accounts.
"""
import logging
from typing import Optional, Union

from eth_abi import encode as abi_encode
from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import is_address, to_checksum_address
from web3 import Web3

from .exceptions import AccountResolutionError, ChainMismatchError, ExecutionPreparationError
from .models import ExecutionParams
from .utils import create2_address, encode_function_call, validate_url

# ERC-6551 registry v0.3.1, deployed at the same address on every chain
ERC6551_REGISTRY = "0x000000006551c19487814612e58fe06813775758"

# Tokenbound V3 account proxy used as the account implementation
TOKENBOUND_ACCOUNT_PROXY = "0x55266d75d1a14e4572138116af39863ed6596e7f"

# Minimal proxy bytecode wrapped around the implementation address
_PROXY_PREFIX = bytes.fromhex("3d60ad80600a3d3981f3363d3d373d3d3d363d73")
_PROXY_SUFFIX = bytes.fromhex("5af43d82803e903d91602b57fd5bf3")

CALL_OPERATION = 0


def account_creation_code(
    implementation: str,
    salt: bytes,
    chain_id: int,
    token_contract: str,
    token_id: int
) -> bytes:
    """
    Creation code the ERC-6551 registry deploys for one account.

    A 10-byte constructor, the ERC-1167 proxy runtime for ``implementation``
    and the ABI-encoded (salt, chain id, token contract, token id) footer.
    """
    return (
        _PROXY_PREFIX
        + bytes.fromhex(to_checksum_address(implementation)[2:])
        + _PROXY_SUFFIX
        + abi_encode(
            ["bytes32", "uint256", "address", "uint256"],
            [salt, chain_id, to_checksum_address(token_contract), token_id]
        )
    )


class TokenboundClient:
    """
    Client for token-bound accounts on one source chain.

    This client handles:
    1. Holding the RPC connection and the signing wallet
    2. Deriving token-bound account addresses
    3. Wrapping calls into account ``execute`` payloads

    Building the client does not touch the network.
    """

    # ABI for the ERC-6551 executable interface of Tokenbound V3 accounts
    ACCOUNT_EXECUTE_ABI = {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "value", "type": "uint256"},
            {"internalType": "bytes", "name": "data", "type": "bytes"},
            {"internalType": "uint8", "name": "operation", "type": "uint8"}
        ],
        "name": "execute",
        "outputs": [{"internalType": "bytes", "name": "", "type": "bytes"}],
        "stateMutability": "payable",
        "type": "function"
    }

    def __init__(
        self,
        rpc_url: str,
        chain_id: int,
        priv_key: Optional[str] = None,
        account: Optional[LocalAccount] = None,
        registry_address: str = ERC6551_REGISTRY,
        implementation_address: str = TOKENBOUND_ACCOUNT_PROXY,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the TokenboundClient

        Args:
            rpc_url: JSON-RPC endpoint of the source chain
            chain_id: Chain the token-bound accounts live on (e.g. 42161)
            priv_key: Wallet private key (optional if account provided)
            account: Pre-built eth_account LocalAccount (optional if priv_key provided)
            registry_address: ERC-6551 registry address
            implementation_address: Account implementation address
            logger: Optional logger instance

        Raises:
            ValueError: If neither priv_key nor account is provided
            ValueError: If the RPC URL has no host
        """
        if not priv_key and account is None:
            raise ValueError("Either priv_key or account must be provided")
        for name, address in [("registry_address", registry_address),
                              ("implementation_address", implementation_address)]:
            if not is_address(address):
                raise ValueError(f"{name} is not a valid address: {address!r}")

        self.rpc_url = validate_url("rpc_url", rpc_url, require_https=False)
        self.chain_id = chain_id
        self.registry_address = to_checksum_address(registry_address)
        self.implementation_address = to_checksum_address(implementation_address)
        self.logger = logger or logging.getLogger(__name__)

        # Set up Web3
        self.w3 = Web3(Web3.HTTPProvider(rpc_url))

        # Setup account
        self.account: LocalAccount = account if account is not None else Account.from_key(priv_key)

    @property
    def address(self) -> str:
        """Address of the signing wallet"""
        return self.account.address

    def assert_chain_id(self) -> None:
        """
        Check that the RPC endpoint serves the configured chain.

        Raises:
            ChainMismatchError: If the endpoint reports another chain id
        """
        actual = self.w3.eth.chain_id
        if actual != self.chain_id:
            raise ChainMismatchError(self.chain_id, actual)
        self.logger.debug(f"Chain ID verified: {actual}")

    def get_account(
        self,
        token_contract: str,
        token_id: int,
        salt: Union[int, bytes] = 0,
        chain_id: Optional[int] = None
    ) -> str:
        """
        Compute the token-bound account address for an NFT.

        Mirrors ``ERC6551Registry.account``: CREATE2 over the registry with
        the minimal proxy creation code, so no RPC call is needed.

        Args:
            token_contract: Address of the owning NFT contract
            token_id: Token id within that contract
            salt: Account salt (int or 32 bytes)
            chain_id: Chain id baked into the account (defaults to client chain)

        Returns:
            Checksum address of the account

        Raises:
            AccountResolutionError: If any input is invalid
        """
        chain_id = self.chain_id if chain_id is None else chain_id
        try:
            if not is_address(token_contract):
                raise ValueError(f"invalid token contract address: {token_contract!r}")
            if isinstance(token_id, bool) or not isinstance(token_id, int) or token_id < 0:
                raise ValueError(f"token id must be a non-negative integer, got {token_id!r}")
            salt_bytes = salt if isinstance(salt, bytes) else int(salt).to_bytes(32, "big")
            if len(salt_bytes) != 32:
                raise ValueError(f"salt must be 32 bytes, got {len(salt_bytes)}")

            token_contract = to_checksum_address(token_contract)
            address = create2_address(
                self.registry_address,
                salt_bytes,
                account_creation_code(self.implementation_address, salt_bytes, chain_id, token_contract, token_id)
            )
        except Exception as e:
            raise AccountResolutionError(f"Failed to resolve token-bound account: {e}") from e

        self.logger.debug(f"Resolved account {address} for {token_contract}#{token_id} on chain {chain_id}")
        return address

    def prepare_execution(
        self,
        account: str,
        to: str,
        value: int,
        data: Union[str, bytes],
        chain_id: int
    ) -> ExecutionParams:
        """
        Describe a call made by a token-bound account, without sending it.

        The resulting transaction targets the account itself and carries an
        ``execute(to, value, data, CALL)`` payload.

        Args:
            account: Token-bound account that performs the call
            to: Contract the account calls
            value: Native value forwarded with the call, in wei
            data: Calldata for ``to``
            chain_id: Chain the call is executed on

        Returns:
            ExecutionParams for the wrapped call

        Raises:
            ExecutionPreparationError: If the inputs cannot be encoded
        """
        try:
            for name, address in [("account", account), ("to", to)]:
                if not is_address(address):
                    raise ValueError(f"{name} is not a valid address: {address!r}")
            value = int(value)
            if value < 0:
                raise ValueError(f"value must not be negative, got {value}")
            if isinstance(data, str):
                data = bytes.fromhex(data[2:] if data.startswith(('0x', '0X')) else data)

            payload = encode_function_call(
                self.ACCOUNT_EXECUTE_ABI,
                [to_checksum_address(to), value, data, CALL_OPERATION]
            )
        except Exception as e:
            self.logger.error(f"Execution preparation failed: {e}")
            raise ExecutionPreparationError(f"Failed to prepare execution: {e}") from e

        return ExecutionParams(
            account=to_checksum_address(account),
            to=to_checksum_address(account),
            value=0,
            data=payload,
            chain_id=chain_id,
        )
