"""Policy compiler: property keys in, cached PolicySet out.

Lifecycle of the cached PolicySet::

    UNINITIALIZED --compile()--> BUILT --recompile()--> INVALIDATED --> BUILT

Builds happen under a lock, so concurrent compile() calls on an empty
cache run exactly one build and all receive the same PolicySet instance.
A failed build caches nothing.
"""

import threading
import time
from enum import Enum

from bai.observability.logging import get_logger
from bai.policy.enums import Qualifier
from bai.policy.errors import MalformedKeyError
from bai.policy.models import Policy, PolicySet
from bai.policy.translators import SEGMENT_SEPARATOR, get_translator
from bai.sources.base import PropertySource

logger = get_logger(__name__)


class CompilerState(str, Enum):
    """Where the compiler's cached PolicySet is in its lifecycle."""

    UNINITIALIZED = "uninitialized"
    BUILT = "built"
    INVALIDATED = "invalidated"


class PolicyCompiler:
    """Compiles a PropertySource into a PolicySet and caches the result."""

    def __init__(
        self,
        source: PropertySource,
        *,
        skip_malformed_keys: bool = False,
    ) -> None:
        """Initialize the compiler.

        Args:
            source: Supplier of raw policy keys and values
            skip_malformed_keys: Log and skip keys that do not fit their
                dialect's grammar instead of failing the whole compile
        """
        self._source = source
        self._skip_malformed_keys = skip_malformed_keys
        self._lock = threading.Lock()
        self._cache: PolicySet | None = None
        self._state = CompilerState.UNINITIALIZED

    @property
    def source(self) -> PropertySource:
        return self._source

    @property
    def state(self) -> CompilerState:
        return self._state

    @property
    def current_policy_set(self) -> PolicySet | None:
        """The cached PolicySet, if any. Never triggers a build."""
        return self._cache

    def compile(self) -> PolicySet:
        """Return the cached PolicySet, building it first if needed."""
        cached = self._cache
        if cached is not None:
            return cached

        with self._lock:
            if self._cache is None:
                self._cache = self._build()
                self._state = CompilerState.BUILT
            return self._cache

    def recompile(self) -> PolicySet:
        """Discard the cached PolicySet and build a new one from the source.

        If the build fails the compiler stays INVALIDATED with no cache;
        the next compile() retries.
        """
        with self._lock:
            self._cache = None
            self._state = CompilerState.INVALIDATED
            logger.debug("policy_set_invalidated")
            self._cache = self._build()
            self._state = CompilerState.BUILT
            return self._cache

    def _build(self) -> PolicySet:
        start_time = time.perf_counter()
        policies: list[Policy] = []
        skipped = 0

        for key in self._source.keys():
            policy = self._compile_key(key, self._source.get(key))
            if policy is None:
                skipped += 1
            else:
                policies.append(policy)

        policy_set = PolicySet(tuple(policies))
        logger.info(
            "policy_set_compiled",
            policies=len(policy_set),
            skipped_keys=skipped,
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )
        return policy_set

    def _compile_key(self, key: str, value: str) -> Policy | None:
        """Compile one key, or return None when the key is skipped."""
        qualifier_token, _, remainder = key.partition(SEGMENT_SEPARATOR)
        qualifier = Qualifier.parse(qualifier_token)

        if qualifier is None:
            logger.debug("policy_key_skipped", key=key, qualifier=qualifier_token)
            return None

        try:
            return get_translator(qualifier).translate(key, remainder, value)
        except MalformedKeyError as e:
            if not self._skip_malformed_keys:
                raise
            logger.warning("malformed_policy_key", key=key, reason=e.reason)
            return None
