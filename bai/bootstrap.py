"""Bootstrap module for embedding the policy compiler.

Loads configuration, configures logging and returns a PolicyCompiler over
the configured property source.

Example usage:

    from bai.bootstrap import bootstrap

    compiler = bootstrap()
    policy_set = compiler.compile()

    # After the policy keys change
    policy_set = compiler.recompile()
"""

from bai.config import Settings, get_settings
from bai.observability.logging import get_logger, setup_logging
from bai.policy.compiler import PolicyCompiler
from bai.policy.factory import create_policy_compiler

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> PolicyCompiler:
    """Configure logging and create the PolicyCompiler.

    Args:
        settings: Settings to use instead of the ones loaded from config/

    Returns:
        PolicyCompiler that has not compiled anything yet
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_credentials=log_config.redact_credentials,
    )

    compiler = create_policy_compiler(settings.policy)
    logger.info(
        "bai_bootstrapped",
        app_name=settings.app_name,
        source=settings.policy.source,
        skip_malformed_keys=settings.policy.skip_malformed_keys,
    )
    return compiler
