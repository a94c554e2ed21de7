from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidVariant
from .packing import word_bytes_for
from .words import SUPPORTED_WORD_BITS


Family = Literal["SIMON", "SPECK"]

# The five 62-bit Simon round-constant sequences z0..z4, stored so that bit i
# (counting from the least significant end) is the i-th published term.
Z_SEQUENCES = (
    0b01100111000011010100100010111110110011100001101010010001011111,
    0b01011010000110010011111011100010101101000011001001111101110001,
    0b11001101101001111110001000010100011001001011000000111011110101,
    0b11110000101100111001010001001000000111101001100011010111011011,
    0b11110111001001010011000011101000000100011011010110011110001011,
)

Z_PERIOD = 62

SIMON_ROUND_CONSTANT = 0xFFFFFFFFFFFFFFFC


class VariantDescriptor(BaseModel):
    """Parameters of one Simon or Speck variant.

    Only the descriptor changes between variants; the key schedule, round
    functions and pipeline read everything they need from it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=3, max_length=40)
    family: Family
    block_size_bits: int = Field(..., ge=32, le=128)
    key_size_bits: int = Field(..., ge=32, le=256)
    word_bits: int
    key_words: int = Field(..., ge=2, le=4)
    rounds: int = Field(..., ge=1, le=128)

    # Speck rotation amounts
    alpha: Optional[int] = Field(default=None, ge=1)
    beta: Optional[int] = Field(default=None, ge=1)

    # Simon z-sequence selector
    z_index: Optional[int] = Field(default=None, ge=0, le=len(Z_SEQUENCES) - 1)

    @field_validator("family", mode="before")
    @classmethod
    def _upper_family(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("word_bits")
    @classmethod
    def _word_bits(cls, v: int) -> int:
        if v not in SUPPORTED_WORD_BITS:
            raise ValueError(f"word_bits must be one of {SUPPORTED_WORD_BITS}")
        return v

    @model_validator(mode="after")
    def _consistent(self) -> "VariantDescriptor":
        errs = self.problems()
        if errs:
            raise ValueError("; ".join(errs))
        return self

    def problems(self) -> List[str]:
        """List every inconsistency between the declared sizes and parameters."""
        errs: List[str] = []
        if self.word_bits * self.key_words != self.key_size_bits:
            errs.append(
                f"word_bits * key_words = {self.word_bits * self.key_words}, "
                f"key_size_bits = {self.key_size_bits}"
            )
        if self.word_bits * 2 != self.block_size_bits:
            errs.append(
                f"word_bits * 2 = {self.word_bits * 2}, block_size_bits = {self.block_size_bits}"
            )

        if self.family == "SPECK":
            if self.alpha is None or self.beta is None:
                errs.append("SPECK variants need alpha and beta")
            else:
                for label, r in (("alpha", self.alpha), ("beta", self.beta)):
                    if not 0 < r < self.word_bits:
                        errs.append(f"{label}={r} must be in 1..{self.word_bits - 1}")
            if self.z_index is not None:
                errs.append("SPECK variants take no z_index")
        else:
            if self.z_index is None:
                errs.append("SIMON variants need z_index")
            if self.alpha is not None or self.beta is not None:
                errs.append("SIMON variants take no alpha/beta")
        return errs

    @property
    def word_bytes(self) -> int:
        return word_bytes_for(self.word_bits)

    @property
    def block_bytes(self) -> int:
        return 2 * self.word_bytes

    @property
    def key_bytes(self) -> int:
        return self.key_words * self.word_bytes

    @property
    def mask(self) -> int:
        return (1 << self.word_bits) - 1

    @property
    def z_sequence(self) -> int:
        if self.z_index is None:
            raise AttributeError(f"{self.name} has no z sequence")
        return Z_SEQUENCES[self.z_index]

    @property
    def round_constant(self) -> int:
        return SIMON_ROUND_CONSTANT & self.mask

    def label(self) -> str:
        return f"{self.name} ({self.word_bits}-bit words, {self.key_words} key words, {self.rounds} rounds)"


def make_variant(**fields) -> VariantDescriptor:
    """Build a descriptor, reporting bad parameters as ``InvalidVariant``."""
    try:
        return VariantDescriptor(**fields)
    except ValidationError as exc:
        name = fields.get("name", "<unnamed>")
        raise InvalidVariant(f"{name}: {exc}") from exc
