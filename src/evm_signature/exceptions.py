class SignatureError(Exception):
    """Base exception for signature operations."""

    pass


class InvalidLengthError(SignatureError):
    """Raw signature is not 65 bytes long."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid signature length, got {length}, expected 65")


class DecodingError(SignatureError):
    """Signature hex string could not be decoded."""

    pass


class VerificationError(SignatureError):
    """Recovered address does not match the expected address."""

    def __init__(self, expected: str, recovered: str):
        self.expected = expected
        self.recovered = recovered
        super().__init__(f"Signature verification failed. Expected {expected}, got {recovered}")


class CurveError(SignatureError):
    """The secp256k1 backend rejected the signature scalars, recovery id or digest."""

    pass


class RecoveryError(SignatureError):
    """Public key recovery error."""

    pass


class SerializationError(SignatureError):
    """Signature cannot be serialized without losing its v value."""

    def __init__(self, v: int):
        self.v = v
        super().__init__(f"Cannot serialize v={v} into a single byte without truncation")
