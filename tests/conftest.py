from unittest.mock import patch

import pytest
from eth_account import Account
from eth_account.datastructures import SignedMessage
from eth_account.messages import encode_defunct
from eth_keys import KeyAPI
from eth_keys.datatypes import PrivateKey
from eth_typing import ChecksumAddress
from eth_utils import decode_hex, to_checksum_address

from evm_signature.config import SignatureConfig
from evm_signature.types.signature_types import Signature

# Test vector from the web3.js eth.accounts.sign documentation
WEB3_SIGNATURE_HEX = (
    "b91467e570a6466aa9e9876cbcd013baba02900b8979d43fe208a4a4f339f5fd"
    "6007e74cd82e037b800186422fc2da167c747ef045e5d18a5f5d4300f8e1a0291c"
)
WEB3_MESSAGE = "Some data"
WEB3_SIGNER = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"

# Hardhat's first development account
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

TEST_MESSAGE = "Hello Ethereum!"


@pytest.fixture(autouse=True)
def clean_env():
    """Keep recovery policy independent of the caller's environment."""
    with patch.dict("os.environ", {}, clear=True):
        yield


@pytest.fixture
def web3_signature() -> Signature:
    """Signature over WEB3_MESSAGE produced by WEB3_SIGNER."""
    return Signature.from_hex(WEB3_SIGNATURE_HEX)


@pytest.fixture
def web3_signer() -> ChecksumAddress:
    return to_checksum_address(WEB3_SIGNER)


@pytest.fixture
def test_address() -> ChecksumAddress:
    """Get the address of the test key."""
    return to_checksum_address(TEST_ADDRESS)


@pytest.fixture
def signed_message() -> SignedMessage:
    """Sign TEST_MESSAGE with the test key."""
    return Account.sign_message(encode_defunct(text=TEST_MESSAGE), private_key=TEST_PRIVATE_KEY)


@pytest.fixture
def test_signature(signed_message: SignedMessage) -> Signature:
    """Test signature in Electrum notation."""
    return Signature(r=signed_message.r, s=signed_message.s, v=signed_message.v)


@pytest.fixture
def strict_config() -> SignatureConfig:
    return SignatureConfig(reject_high_s=True)


@pytest.fixture
def private_key() -> PrivateKey:
    """Get the eth_keys private key for the test account."""
    return KeyAPI().PrivateKey(decode_hex(TEST_PRIVATE_KEY))
