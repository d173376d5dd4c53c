"""Configuration schema and validation for depimpact."""

from .schema import AnalysisConfig, EngineConfig, OutputConfig

__all__ = [
    "AnalysisConfig",
    "EngineConfig",
    "OutputConfig",
]
