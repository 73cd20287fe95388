"""PolicyCompiler factory.

Creates the configured PropertySource and wraps it in a PolicyCompiler.
"""

from bai.config.models.policy import PolicyConfig
from bai.observability.logging import get_logger
from bai.policy.compiler import PolicyCompiler
from bai.sources.base import PropertySource
from bai.sources.inmemory import InMemoryPropertySource
from bai.sources.toml import TomlPropertySource

logger = get_logger(__name__)


def create_property_source(config: PolicyConfig) -> PropertySource:
    """Create a PropertySource based on configuration.

    Raises:
        ValueError: If the backend type is not supported or the toml
            backend has no path
    """
    backend = config.source

    if backend == "inmemory":
        logger.info("creating_property_source", backend="inmemory", keys=len(config.properties))
        return InMemoryPropertySource(config.properties)

    elif backend == "toml":
        if config.path is None:
            raise ValueError("The toml property source backend requires a path")
        logger.info("creating_property_source", backend="toml", path=str(config.path))
        return TomlPropertySource(config.path)

    raise ValueError(f"Unsupported property source backend: {backend}")


def create_policy_compiler(config: PolicyConfig) -> PolicyCompiler:
    """Create a PolicyCompiler over the configured property source."""
    return PolicyCompiler(
        create_property_source(config),
        skip_malformed_keys=config.skip_malformed_keys,
    )
