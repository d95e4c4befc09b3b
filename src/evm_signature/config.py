"""Configuration settings for signature recovery."""

import os

from pydantic import BaseModel, field_validator

# Configuration Constants
ENV_REJECT_HIGH_S = "SIGNATURE_REJECT_HIGH_S"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class SignatureConfig(BaseModel):
    """Policy settings applied when recovering signers."""

    # Reject signatures whose s value lies in the upper half of the curve order (EIP-2)
    reject_high_s: bool = False

    @field_validator("reject_high_s", mode="before")
    @classmethod
    def parse_flag(cls, v):
        """Accept the usual textual spellings of a boolean flag."""
        if isinstance(v, str):
            value = v.strip().lower()
            if value in TRUE_VALUES:
                return True
            if value in FALSE_VALUES:
                return False
            msg = f"Invalid boolean value: {v!r}"
            raise ValueError(msg)
        return v

    class Config:
        validate_assignment = True

    @classmethod
    def from_env(cls) -> "SignatureConfig":
        """
        Create configuration from environment variables.

        Unset variables fall back to the field defaults.

        Returns:
            SignatureConfig: Configuration instance with values from environment variables.

        Example:
            ```python
            config = SignatureConfig.from_env()
            address = recover(signature, "Some data", config=config)
            ```
        """
        values = {}
        reject_high_s = os.getenv(ENV_REJECT_HIGH_S)
        if reject_high_s is not None:
            values["reject_high_s"] = reject_high_s
        return cls(**values)
