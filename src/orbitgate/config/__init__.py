"""Gate configuration file: schema and position-tracking loader."""

from orbitgate.config.loader import ConfigSafetyError, GateConfigLoader, SourceMap
from orbitgate.config.models import AnalysisConfig, GateConfig

__all__ = [
    "AnalysisConfig",
    "ConfigSafetyError",
    "GateConfig",
    "GateConfigLoader",
    "SourceMap",
]
