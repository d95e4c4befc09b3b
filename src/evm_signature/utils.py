"""Cryptographic utilities."""

import ecdsa
from ecdsa.errors import MalformedPointError
from eth_keys.datatypes import PublicKey
from eth_utils import keccak

from evm_signature.exceptions import RecoveryError

# secp256k1 curve order
SECP256K1_N = int("fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141", 16)

# Returned by normalize_recovery_id for v values outside every known encoding
INVALID_RECOVERY_ID = 4

UNCOMPRESSED_PREFIX = 0x04
UNCOMPRESSED_KEY_LENGTH = 65
ADDRESS_LENGTH = 20


def normalize_recovery_id(v: int) -> int:
    """
    Map a signature v value to its recovery id.

    Raw ids (0, 1), Electrum notation (27, 28) and EIP-155 values
    (``chain_id * 2 + 35 + bit``) are understood. Anything else maps to
    ``INVALID_RECOVERY_ID``.
    """
    if v in (0, 27):
        return 0
    if v in (1, 28):
        return 1
    if v >= 35:
        return (v - 1) % 2
    return INVALID_RECOVERY_ID


def is_low_s(s: int) -> bool:
    """Check the s value is in the lower half of the curve order (EIP-2)."""
    return s <= SECP256K1_N // 2


def encode_uncompressed(public_key: PublicKey) -> bytes:
    """Encode a recovered public key as an uncompressed SEC1 point."""
    try:
        verifying_key = ecdsa.VerifyingKey.from_string(public_key.to_bytes(), curve=ecdsa.SECP256k1)
    except MalformedPointError as error:
        msg = f"Recovered public key is not a valid curve point: {error}"
        raise RecoveryError(msg) from error
    return verifying_key.to_string("uncompressed")


def public_key_to_address(encoded: bytes) -> bytes:
    """Derive the 20-byte address from an uncompressed public key."""
    if len(encoded) != UNCOMPRESSED_KEY_LENGTH or encoded[0] != UNCOMPRESSED_PREFIX:
        msg = f"Expected a {UNCOMPRESSED_KEY_LENGTH}-byte uncompressed public key starting with 0x04"
        raise RecoveryError(msg)
    return keccak(encoded[1:])[-ADDRESS_LENGTH:]
