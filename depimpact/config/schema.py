"""Configuration schema definitions using Pydantic for validation.

Analysis calls themselves take no configuration; these settings control the
batch recompile map and how results are written.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Configuration for batch analysis.

    Attributes:
        max_workers: Worker threads used to resolve roots concurrently
            (1 resolves them serially).
    """

    max_workers: int = Field(default=4, ge=1, le=64)

    model_config = {"extra": "forbid"}


class OutputConfig(BaseModel):
    """Configuration for JSON result output.

    Attributes:
        indent: JSON indentation (0 for compact single-line output).
        sort_keys: Whether mapping keys are sorted in the output.
    """

    indent: int = Field(default=2, ge=0, le=8)
    sort_keys: bool = True

    model_config = {"extra": "forbid"}


class EngineConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        analysis: Batch analysis configuration.
        output: Result output configuration.
    """

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "EngineConfig":
        """Return the built-in default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            EngineConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
