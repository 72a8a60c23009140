"""
Decoded symbol models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BarcodeSymbology(str, Enum):
    """Symbologies this package produces or recognises."""

    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    UNKNOWN = "UNKNOWN"


class UPCESymbol(BaseModel):
    """
    A UPC-E symbol decoded from one bit row.

    ``code`` is the 8-digit form: number system, six payload digits, check digit.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Number system, six payload digits and check digit")
    start_range: tuple[int, int] | None = Field(None, description="Start guard offsets in the row")
    end_range: tuple[int, int] | None = Field(None, description="End guard offsets in the row")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if len(v) != 8 or not v.isdigit():
            raise ValueError(f"UPC-E code must be 8 digits, got {v!r}")
        if v[0] not in "01":
            raise ValueError(f"UPC-E number system must be 0 or 1, got {v[0]}")
        return v

    @property
    def number_system(self) -> int:
        return int(self.code[0])

    @property
    def payload(self) -> str:
        """The six digits actually encoded in the bars."""
        return self.code[1:7]

    @property
    def check_digit(self) -> int:
        return int(self.code[7])

