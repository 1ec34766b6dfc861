"""
Shared option enumerations.
"""

from enum import Enum


class OptionType(Enum):
    """Option type enumeration."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def from_flag(cls, is_call: bool) -> "OptionType":
        """Map a call/put flag to an OptionType."""
        return cls.CALL if is_call else cls.PUT


class SwaptionType(Enum):
    """Swaption type enumeration."""

    PAYER = "payer"
    RECEIVER = "receiver"

    @classmethod
    def from_flag(cls, is_payer: bool) -> "SwaptionType":
        """Map a payer/receiver flag to a SwaptionType."""
        return cls.PAYER if is_payer else cls.RECEIVER
