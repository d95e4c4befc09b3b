"""Signer recovery and verification for secp256k1 Ethereum signatures."""

import logging

from eth_account.messages import _hash_eip191_message, encode_defunct  # noqa: PLC2701
from eth_keys import KeyAPI
from eth_keys.exceptions import BadSignature, ValidationError
from eth_typing import ChecksumAddress, Hash32
from eth_utils import to_canonical_address, to_checksum_address

from evm_signature.config import SignatureConfig
from evm_signature.exceptions import CurveError, DecodingError, VerificationError
from evm_signature.types.signature_types import MessageKind, RecoveryMessage, Signature
from evm_signature.utils import encode_uncompressed, public_key_to_address

logger = logging.getLogger(__name__)

keys = KeyAPI()


def hash_message(data: bytes) -> Hash32:
    """Hash message bytes with the personal-sign prefix (EIP-191 version E)."""
    return Hash32(_hash_eip191_message(encode_defunct(primitive=data)))


def resolve_digest(message: RecoveryMessage) -> Hash32:
    """Get the 32-byte digest a signature over ``message`` was made on."""
    if message.kind is MessageKind.DATA:
        return hash_message(message.payload)
    return Hash32(message.payload)


def recover(
    signature: Signature,
    message: RecoveryMessage | str | bytes | bytearray,
    config: SignatureConfig | None = None,
) -> ChecksumAddress:
    """
    Recover the address which signed the given message.

    Args:
        signature: Signature to recover from. ``v`` may be a raw recovery id,
            Electrum notation (27/28) or an EIP-155 value.
        message: Message data (pre-hashed per EIP-191) or a precomputed hash
        config: Recovery policy, read from the environment when omitted

    Returns:
        ChecksumAddress: Address of the signer

    Raises:
        RecoveryError: If ``v`` is unsupported or the recovered key is malformed
        CurveError: If the secp256k1 backend rejects the signature

    Example:
        >>> sig = Signature.from_hex("0xb91467e5...1c")
        >>> recover(sig, "Some data")
        '0x2c7536E3605D9C16a7a3D7b1898e529396a65c23'
    """
    config = config or SignatureConfig.from_env()
    message_hash = resolve_digest(RecoveryMessage.coerce(message))

    rsv = signature.to_recoverable_bytes()
    logger.debug("Recovering signer with recovery id %d (v=%d)", rsv[64], signature.v)

    if config.reject_high_s and not signature.is_low_s:
        msg = "Signature s value is not in the lower half of the curve order"
        raise CurveError(msg)

    try:
        public_key = keys.Signature(signature_bytes=rsv).recover_public_key_from_msg_hash(message_hash)
    except (BadSignature, ValidationError) as error:
        msg = f"Failed to recover public key: {error}"
        raise CurveError(msg) from error

    address = to_checksum_address(public_key_to_address(encode_uncompressed(public_key)))
    logger.debug("Recovered signer %s", address)
    return address


def verify(
    signature: Signature,
    message: RecoveryMessage | str | bytes | bytearray,
    address: str | bytes,
    config: SignatureConfig | None = None,
) -> None:
    """
    Verify that ``signature`` over ``message`` was produced by ``address``.

    Raises:
        DecodingError: If ``address`` is not a 20-byte address or its hex form
        VerificationError: If the recovered address differs from ``address``
    """
    try:
        expected = to_canonical_address(address)
    except ValueError as error:
        msg = f"Invalid expected address: {error}"
        raise DecodingError(msg) from error

    recovered = recover(signature, message, config=config)
    if to_canonical_address(recovered) != expected:
        logger.warning("Signature verification failed: expected %s, recovered %s", address, recovered)
        raise VerificationError(to_checksum_address(expected), recovered)
