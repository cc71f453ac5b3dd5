"""
Pattern execution engine for the heuristic repair steps.

Every regex-driven heuristic in bracesetter runs through a single engine so
that:
- patterns are compiled once by the ``regex`` module and cached (LRU)
- execution counts and timings are tracked for monitoring
- unusually slow patterns can be reported through ``logging``

All scans are bounded by input length, so no timeout handling is needed.
"""

import logging
import threading
import time
from collections import OrderedDict, deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

import regex

# Timings kept per pattern for get_slowest_patterns
TIMING_HISTORY = 100

# ============================================================================
# Configuration
# ============================================================================


@dataclass
class RegexConfig:
    """Configuration for regex engine behavior."""

    # Caching
    cache_size: int = 128  # Number of compiled patterns to cache
    cache_enabled: bool = True

    # Monitoring
    enable_metrics: bool = True
    log_slow_patterns: bool = False
    slow_threshold_ms: float = 100.0

    # Logging
    logger: Optional[logging.Logger] = None


# ============================================================================
# Metrics Tracking
# ============================================================================


@dataclass
class RegexMetrics:
    """Operation counts and recent per-pattern timings."""

    total_operations: int = 0
    cache_hits: int = 0
    cache_misses: int = 0

    # Pattern -> most recent execution times (ms)
    pattern_timings: dict[str, deque[float]] = field(default_factory=dict)

    _lock: threading.RLock = field(default_factory=threading.RLock)

    def record_operation(self) -> None:
        with self._lock:
            self.total_operations += 1

    def record_cache_hit(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def record_cache_miss(self) -> None:
        with self._lock:
            self.cache_misses += 1

    def record_timing(self, pattern: str, duration_ms: float) -> None:
        with self._lock:
            if pattern not in self.pattern_timings:
                self.pattern_timings[pattern] = deque(maxlen=TIMING_HISTORY)
            self.pattern_timings[pattern].append(duration_ms)

    def get_slowest_patterns(self, n: int = 10) -> list[tuple[str, float]]:
        """The ``n`` patterns with the highest mean execution time."""
        with self._lock:
            means = [
                (pattern, sum(times) / len(times))
                for pattern, times in self.pattern_timings.items()
                if times
            ]
        means.sort(key=lambda item: item[1], reverse=True)
        return means[:n]

    def get_cache_hit_rate(self) -> float:
        """Cache hits as a percentage of lookups."""
        with self._lock:
            lookups = self.cache_hits + self.cache_misses
            return (self.cache_hits / lookups) * 100.0 if lookups else 0.0


# ============================================================================
# Pattern Cache
# ============================================================================


class PatternCache:
    """Thread-safe LRU cache of compiled patterns keyed by (pattern, flags)."""

    def __init__(self, maxsize: int = 128):
        self.maxsize = maxsize
        self._lock = threading.RLock()
        self._cache: OrderedDict[tuple[str, int], Any] = OrderedDict()

    def get(self, pattern: str, flags: int) -> Optional[Any]:
        key = (pattern, flags)
        with self._lock:
            compiled = self._cache.get(key)
            if compiled is not None:
                self._cache.move_to_end(key)
            return compiled

    def put(self, pattern: str, flags: int, compiled: Any) -> None:
        key = (pattern, flags)
        with self._lock:
            self._cache[key] = compiled
            self._cache.move_to_end(key)
            while len(self._cache) > self.maxsize > 0:
                self._cache.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._cache)


# ============================================================================
# Engine
# ============================================================================


class RegexEngine:
    """
    Cached, metered regex execution backed by the ``regex`` module.

    This is the primary interface for all pattern operations in bracesetter.
    """

    def __init__(self, config: Optional[RegexConfig] = None):
        self.config = config or RegexConfig()
        self.cache = (
            PatternCache(self.config.cache_size) if self.config.cache_enabled else None
        )
        self.metrics = RegexMetrics() if self.config.enable_metrics else None
        self.logger = self.config.logger or logging.getLogger(__name__)

        self.logger.info(
            f"RegexEngine initialized (cache={'on' if self.cache else 'off'}, "
            f"metrics={'on' if self.metrics else 'off'})"
        )

    def compile(self, pattern: str, flags: int = 0) -> Any:
        """Get compiled pattern from cache or compile new one."""
        if self.cache:
            cached = self.cache.get(pattern, flags)
            if cached is not None:
                if self.metrics:
                    self.metrics.record_cache_hit()
                return cached

        if self.metrics:
            self.metrics.record_cache_miss()

        compiled = regex.compile(pattern, flags)

        if self.cache:
            self.cache.put(pattern, flags, compiled)

        return compiled

    def _timed(self, operation: str, pattern: str, func: Callable[[], Any]) -> Any:
        """Run one operation, recording metrics if enabled."""
        if not self.metrics:
            return func()

        start = time.perf_counter()
        try:
            return func()
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            self.metrics.record_operation()
            self.metrics.record_timing(pattern, duration_ms)
            if (
                self.config.log_slow_patterns
                and duration_ms > self.config.slow_threshold_ms
            ):
                self.logger.warning(
                    f"Slow regex {operation} detected ({duration_ms:.2f}ms): "
                    f"pattern={pattern[:50]}"
                )

    def search(self, pattern: str, string: str, flags: int = 0) -> Optional[Any]:
        """Search for pattern anywhere in string."""
        compiled = self.compile(pattern, flags)
        return self._timed("search", pattern, lambda: compiled.search(string))

    def match(self, pattern: str, string: str, flags: int = 0) -> Optional[Any]:
        """Match pattern at start of string."""
        compiled = self.compile(pattern, flags)
        return self._timed("match", pattern, lambda: compiled.match(string))

    def sub(
        self,
        pattern: str,
        repl: Union[str, Callable[[Any], str]],
        string: str,
        count: int = 0,
        flags: int = 0,
    ) -> str:
        """Replace pattern matches in string."""
        compiled = self.compile(pattern, flags)
        return self._timed(  # type: ignore[no-any-return]
            "sub", pattern, lambda: compiled.sub(repl, string, count=count)
        )

    def findall(self, pattern: str, string: str, flags: int = 0) -> list[Any]:
        """Find all non-overlapping matches."""
        compiled = self.compile(pattern, flags)
        return self._timed(  # type: ignore[no-any-return]
            "findall", pattern, lambda: compiled.findall(string)
        )

    def finditer(self, pattern: str, string: str, flags: int = 0) -> Iterator[Any]:
        """Iterate over match objects in order."""
        compiled = self.compile(pattern, flags)
        return self._timed(  # type: ignore[no-any-return]
            "finditer", pattern, lambda: iter(list(compiled.finditer(string)))
        )

    def get_metrics(self) -> Optional[RegexMetrics]:
        """Get current metrics (if enabled)."""
        return self.metrics

    def clear_cache(self) -> None:
        """Clear the pattern cache."""
        if self.cache:
            self.cache.clear()


# ============================================================================
# Singleton Accessor
# ============================================================================

_global_engine: Optional[RegexEngine] = None
_global_engine_lock = threading.RLock()


def get_engine(config: Optional[RegexConfig] = None) -> RegexEngine:
    """
    Get or create the global RegexEngine instance.

    Args:
        config: Optional configuration. Only used on first call.

    Returns:
        Global RegexEngine instance
    """
    global _global_engine

    if _global_engine is None:
        with _global_engine_lock:
            if _global_engine is None:
                _global_engine = RegexEngine(config)

    return _global_engine


def reset_engine() -> None:
    """Reset the global engine (mainly for testing)."""
    global _global_engine
    with _global_engine_lock:
        _global_engine = None
