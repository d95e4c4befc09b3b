from evm_signature.config import SignatureConfig
from evm_signature.exceptions import (
    CurveError,
    DecodingError,
    InvalidLengthError,
    RecoveryError,
    SerializationError,
    SignatureError,
    VerificationError,
)
from evm_signature.recovery import hash_message, recover, verify
from evm_signature.types.signature_types import MessageKind, RecoveryMessage, Signature
from evm_signature.utils import normalize_recovery_id

__all__ = [
    "CurveError",
    "DecodingError",
    "InvalidLengthError",
    "MessageKind",
    "RecoveryError",
    "RecoveryMessage",
    "SerializationError",
    "Signature",
    "SignatureConfig",
    "SignatureError",
    "VerificationError",
    "hash_message",
    "normalize_recovery_id",
    "recover",
    "verify",
]
