"""
kmersketch configuration management.

Sketch parameters and logging level, with environment overrides.
"""

from pydantic import BaseModel, Field, field_validator
import os

from kmersketch.sketches.minhash import DEFAULT_PRIME, KmerMinHash

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SketchConfig(BaseModel):
    """Parameters used when building new sketches."""

    # Sketch shape
    num: int = Field(
        default_factory=lambda: int(os.getenv("KMERSKETCH_NUM", "500")),
        gt=0,
        validate_default=True,
    )
    ksize: int = Field(
        default_factory=lambda: int(os.getenv("KMERSKETCH_KSIZE", "31")),
        gt=0,
        validate_default=True,
    )
    prime: int = Field(
        default_factory=lambda: int(os.getenv("KMERSKETCH_PRIME", str(DEFAULT_PRIME))),
        ge=2,
        validate_default=True,
    )
    is_protein: bool = Field(
        default_factory=lambda: os.getenv("KMERSKETCH_PROTEIN", "false").lower() == "true"
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("KMERSKETCH_LOG_LEVEL", "INFO"),
        validate_default=True,
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
        return level

    def new_sketch(self) -> KmerMinHash:
        """Create an empty sketch with these parameters."""
        return KmerMinHash(
            num=self.num,
            ksize=self.ksize,
            prime=self.prime,
            is_protein=self.is_protein,
        )
