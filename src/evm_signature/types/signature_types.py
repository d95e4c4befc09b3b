import logging
from enum import Enum

from eth_typing import HexStr
from eth_utils import decode_hex
from pydantic import BaseModel, Field, field_validator, model_validator

from evm_signature.exceptions import DecodingError, InvalidLengthError, RecoveryError, SerializationError
from evm_signature.utils import INVALID_RECOVERY_ID, is_low_s, normalize_recovery_id

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH: int = 65
SCALAR_LENGTH: int = 32
MSG_HASH_LENGTH: int = 32

UINT256_CEILING = 2**256
UINT64_CEILING = 2**64

# v values that survive the single-byte wire encoding unchanged
NORMALIZED_V_VALUES = frozenset({0, 1, 27, 28})


class Signature(BaseModel):
    """Represents an Ethereum signature with r, s, v components."""

    r: int = Field(..., strict=True, description="R component of signature")
    s: int = Field(..., strict=True, description="S component of signature")
    v: int = Field(..., strict=True, description="Recovery identifier")

    @field_validator("r", "s")
    @classmethod
    def validate_scalar(cls, v: int) -> int:
        if not 0 <= v < UINT256_CEILING:
            msg = "Value must be an unsigned 256-bit integer"
            raise ValueError(msg)
        return v

    @field_validator("v")
    @classmethod
    def validate_v(cls, v: int) -> int:
        if not 0 <= v < UINT64_CEILING:
            msg = "v must be an unsigned 64-bit integer"
            raise ValueError(msg)
        return v

    class Config:
        frozen = True

    @classmethod
    def from_bytes(cls, data: bytes) -> "Signature":
        """
        Parse a raw 65-byte signature.

        The first 32 bytes are ``r``, the next 32 bytes ``s`` and the final
        byte ``v``, usually in Electrum notation (27 or 28).

        Raises:
            InvalidLengthError: If ``data`` is not exactly 65 bytes long
        """
        if len(data) != SIGNATURE_LENGTH:
            raise InvalidLengthError(len(data))
        return cls(
            r=int.from_bytes(data[0:32], "big"),
            s=int.from_bytes(data[32:64], "big"),
            v=data[64],
        )

    @classmethod
    def from_hex(cls, hex_str: str) -> "Signature":
        """Create signature from hex string, with or without a 0x prefix."""
        try:
            sig_bytes = decode_hex(hex_str)
        except ValueError as error:
            msg = f"Invalid signature hex string: {error}"
            raise DecodingError(msg) from error
        return cls.from_bytes(sig_bytes)

    def to_bytes(self, strict: bool = False) -> bytes:
        """
        Serialize to the 65-byte ``r || s || v`` layout.

        Only the low byte of ``v`` is written. With ``strict`` set, any ``v``
        other than 0, 1, 27 or 28 raises ``SerializationError`` instead.
        """
        if self.v not in NORMALIZED_V_VALUES:
            if strict:
                raise SerializationError(self.v)
            if self.v > 0xFF:
                logger.warning("Truncating v=%d to its low byte during serialization", self.v)
        return self.r.to_bytes(SCALAR_LENGTH, "big") + self.s.to_bytes(SCALAR_LENGTH, "big") + bytes([self.v & 0xFF])

    def to_hex(self, strict: bool = False) -> HexStr:
        """Convert signature to hex string."""
        return HexStr("0x" + self.to_bytes(strict=strict).hex())

    def to_recoverable_bytes(self) -> bytes:
        """Get ``r || s || recovery_id``, the layout secp256k1 backends recover from."""
        return (
            self.r.to_bytes(SCALAR_LENGTH, "big")
            + self.s.to_bytes(SCALAR_LENGTH, "big")
            + bytes([self.recovery_id()])
        )

    def recovery_id(self) -> int:
        """
        Get the normalized recovery id (0 or 1).

        Raises:
            RecoveryError: If ``v`` is not a recognized encoding of the recovery id
        """
        recovery_id = normalize_recovery_id(self.v)
        if recovery_id == INVALID_RECOVERY_ID:
            msg = f"Public key recovery error: unsupported v value {self.v}"
            raise RecoveryError(msg)
        return recovery_id

    @property
    def is_low_s(self) -> bool:
        return is_low_s(self.s)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_hex()


class MessageKind(str, Enum):
    """What a RecoveryMessage payload holds."""

    DATA = "data"
    HASH = "hash"


class RecoveryMessage(BaseModel):
    """
    Message a signature is recovered against.

    ``DATA`` payloads are pre-hashed with the personal-sign (EIP-191) prefix
    during recovery; ``HASH`` payloads are 32-byte digests used as-is.
    """

    kind: MessageKind
    payload: bytes

    @model_validator(mode="after")
    def validate_hash_length(self) -> "RecoveryMessage":
        if self.kind is MessageKind.HASH and len(self.payload) != MSG_HASH_LENGTH:
            msg = f"Message hash must be {MSG_HASH_LENGTH} bytes, got {len(self.payload)} bytes"
            raise ValueError(msg)
        return self

    class Config:
        frozen = True

    @classmethod
    def from_data(cls, data: bytes | bytearray) -> "RecoveryMessage":
        return cls(kind=MessageKind.DATA, payload=bytes(data))

    @classmethod
    def from_text(cls, text: str) -> "RecoveryMessage":
        return cls(kind=MessageKind.DATA, payload=text.encode("utf-8"))

    @classmethod
    def from_hash(cls, message_hash: bytes) -> "RecoveryMessage":
        return cls(kind=MessageKind.HASH, payload=bytes(message_hash))

    @classmethod
    def coerce(cls, message: "RecoveryMessage | str | bytes | bytearray") -> "RecoveryMessage":
        """
        Build a message from the shapes callers commonly hold.

        Plain bytes are always treated as message data, even when 32 bytes
        long. Use ``from_hash`` for digests.
        """
        if isinstance(message, RecoveryMessage):
            return message
        if isinstance(message, str):
            return cls.from_text(message)
        if isinstance(message, (bytes, bytearray)):
            return cls.from_data(message)
        raise TypeError(f"Unsupported message type: {type(message)}")
