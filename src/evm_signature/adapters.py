"""Conversions between Signature and other libraries' signature objects."""

from typing import Protocol

from eth_keys import KeyAPI
from eth_keys.datatypes import Signature as EthKeysSignature
from eth_keys.exceptions import BadSignature, ValidationError

from evm_signature.exceptions import CurveError
from evm_signature.types.signature_types import Signature


class SupportsVRS(Protocol):
    """Anything exposing integer v, r and s, such as eth_account's SignedMessage."""

    v: int
    r: int
    s: int


def from_eth_keys(signature: EthKeysSignature) -> Signature:
    """Convert an eth_keys signature, whose v is the raw recovery id."""
    return Signature(r=signature.r, s=signature.s, v=signature.v)


def to_eth_keys(signature: Signature) -> EthKeysSignature:
    """Convert to an eth_keys signature with a normalized recovery id."""
    try:
        return KeyAPI().Signature(signature_bytes=signature.to_recoverable_bytes())
    except (BadSignature, ValidationError) as error:
        msg = f"Signature rejected by eth_keys: {error}"
        raise CurveError(msg) from error


def from_signed_message(signed: SupportsVRS) -> Signature:
    """Convert a signed message produced by eth_account or similar tooling."""
    return Signature(r=signed.r, s=signed.s, v=signed.v)


def to_vrs(signature: Signature) -> tuple[int, int, int]:
    """Get the ``(v, r, s)`` tuple accepted by ``Account.recover_message``."""
    return signature.v, signature.r, signature.s
