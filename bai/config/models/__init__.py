"""Configuration model exports.

    from bai.config.models import PolicyConfig, ObservabilityConfig
"""

from bai.config.models.observability import LoggingConfig, ObservabilityConfig
from bai.config.models.policy import PolicyConfig

__all__ = [
    # Observability
    "LoggingConfig",
    "ObservabilityConfig",
    # Policy
    "PolicyConfig",
]
