from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

class CodecConfig(BaseModel):
    """
    Decimal codec settings.

    `strategy` picks how values are formatted: "digits" peels one decimal digit
    per division, "chunked" peels `digits_per_chunk` digits per division, and
    "auto" uses chunks for widths of at least `chunked_min_bits`.
    """
    model_config = ConfigDict(frozen=True)

    strategy: Literal["auto", "digits", "chunked"] = "auto"
    chunked_min_bits: int = Field(default=128, ge=64)
    # 10^18 is the largest power of ten below 2^63
    digits_per_chunk: int = Field(default=9, ge=1, le=18)
    allow_leading_plus: bool = True

    def use_chunks(self, bits: int) -> bool:
        if self.strategy == "auto":
            return bits >= self.chunked_min_bits
        return self.strategy == "chunked"

DEFAULT_CODEC = CodecConfig()
