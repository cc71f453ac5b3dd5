"""
Tests for the RegexEngine implementation.

Tests cover:
- Basic operations
- Pattern caching and LRU eviction
- Metrics tracking
- Slow pattern logging
- Thread safety
- Global engine management
"""

import logging
import threading

import pytest
import regex

from bracesetter.core.regex_engine import (
    PatternCache,
    RegexConfig,
    RegexEngine,
    get_engine,
    reset_engine,
)

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def engine():
    """Create a fresh engine for each test."""
    return RegexEngine(RegexConfig(cache_enabled=True, enable_metrics=True))


@pytest.fixture
def engine_no_cache():
    """Engine without caching."""
    return RegexEngine(RegexConfig(cache_enabled=False, enable_metrics=True))


@pytest.fixture(autouse=True)
def cleanup_global_engine():
    """Reset global engine around each test."""
    reset_engine()
    yield
    reset_engine()


# ============================================================================
# Basic Functionality Tests
# ============================================================================


class TestBasicOperations:
    """Test basic regex operations work correctly."""

    def test_simple_search(self, engine):
        result = engine.search(r"\d+", "test123")
        assert result is not None
        assert result.group() == "123"

    def test_simple_match(self, engine):
        result = engine.match(r"\d+", "123test")
        assert result is not None
        assert result.group() == "123"

        # Should not match if pattern not at start
        assert engine.match(r"\d+", "test123") is None

    def test_simple_sub(self, engine):
        assert engine.sub(r"\d+", "X", "a1b22c333") == "aXbXcX"

    def test_sub_with_count_and_callable(self, engine):
        assert engine.sub(r"\d", "#", "123", count=2) == "##3"
        result = engine.sub(r"[a-z]+", lambda m: m.group(0).upper(), "ab 12 cd")
        assert result == "AB 12 CD"

    def test_findall_and_finditer(self, engine):
        assert engine.findall(r"\d+", "a1b22c333") == ["1", "22", "333"]
        spans = [m.span() for m in engine.finditer(r"<[^>]+>", "<a>x<b>")]
        assert spans == [(0, 3), (4, 7)]

    def test_regex_flags(self, engine):
        assert engine.search(r"TEST", "test123", flags=regex.IGNORECASE) is not None
        assert engine.search(r"TEST", "test123") is None


# ============================================================================
# Caching Tests
# ============================================================================


class TestPatternCaching:
    """Test pattern compilation caching."""

    def test_compiled_pattern_is_reused(self, engine):
        first = engine.compile(r"\w+")
        second = engine.compile(r"\w+")
        assert first is second

        metrics = engine.get_metrics()
        assert metrics.cache_misses == 1
        assert metrics.cache_hits == 1
        assert metrics.get_cache_hit_rate() == 50.0

    def test_flags_are_part_of_the_key(self, engine):
        plain = engine.compile(r"abc")
        ignore_case = engine.compile(r"abc", regex.IGNORECASE)
        assert plain is not ignore_case
        assert engine.cache.size() == 2

    def test_no_cache_recompiles(self, engine_no_cache):
        engine_no_cache.search(r"\d", "1")
        engine_no_cache.search(r"\d", "2")
        assert engine_no_cache.cache is None
        assert engine_no_cache.get_metrics().cache_misses == 2

    def test_clear_cache(self, engine):
        engine.compile(r"a")
        engine.clear_cache()
        assert engine.cache.size() == 0


class TestPatternCache:
    def test_lru_eviction(self):
        cache = PatternCache(maxsize=2)
        cache.put("a", 0, "A")
        cache.put("b", 0, "B")
        assert cache.get("a", 0) == "A"  # a is now most recent
        cache.put("c", 0, "C")

        assert cache.get("b", 0) is None
        assert cache.get("a", 0) == "A"
        assert cache.get("c", 0) == "C"
        assert cache.size() == 2

    def test_put_existing_key_replaces(self):
        cache = PatternCache(maxsize=2)
        cache.put("a", 0, "old")
        cache.put("a", 0, "new")
        assert cache.get("a", 0) == "new"
        assert cache.size() == 1


# ============================================================================
# Metrics Tests
# ============================================================================


class TestMetrics:
    def test_operations_and_timings_recorded(self, engine):
        engine.search(r"\d", "a1")
        engine.sub(r"\d", "", "a1")

        metrics = engine.get_metrics()
        assert metrics.total_operations == 2
        assert len(metrics.pattern_timings[r"\d"]) == 2
        assert metrics.get_slowest_patterns(1)[0][0] == r"\d"

    def test_timings_are_bounded(self, engine):
        for _ in range(150):
            engine.search(r"x", "x")
        assert len(engine.get_metrics().pattern_timings["x"]) == 100

    def test_metrics_disabled(self):
        engine = RegexEngine(RegexConfig(enable_metrics=False))
        assert engine.search(r"\d", "1").group() == "1"
        assert engine.get_metrics() is None

    def test_slow_patterns_logged(self, caplog):
        config = RegexConfig(log_slow_patterns=True, slow_threshold_ms=-1.0)
        engine = RegexEngine(config)
        with caplog.at_level(logging.WARNING, logger="bracesetter.core.regex_engine"):
            engine.search(r"\d+", "abc123")
        assert "Slow regex search" in caplog.text

    def test_custom_logger(self, caplog):
        custom = logging.getLogger("tests.regex")
        config = RegexConfig(
            logger=custom, log_slow_patterns=True, slow_threshold_ms=-1.0
        )
        engine = RegexEngine(config)
        with caplog.at_level(logging.WARNING, logger="tests.regex"):
            engine.match(r"a", "a")
        assert any(record.name == "tests.regex" for record in caplog.records)


# ============================================================================
# Thread Safety Tests
# ============================================================================


class TestThreadSafety:
    def test_concurrent_operations(self, engine):
        errors = []

        def worker(n):
            try:
                for i in range(50):
                    result = engine.search(rf"item{n % 5}", f"x item{n % 5} {i}")
                    assert result is not None
            except Exception as e:  # pylint: disable=broad-exception-caught
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not errors
        assert engine.get_metrics().total_operations == 500
        assert engine.cache.size() == 5


# ============================================================================
# Global Engine Tests
# ============================================================================


class TestGlobalEngine:
    def test_get_engine_returns_singleton(self):
        assert get_engine() is get_engine()

    def test_config_only_used_on_first_call(self):
        first = get_engine(RegexConfig(cache_size=7))
        second = get_engine(RegexConfig(cache_size=9))
        assert first is second
        assert first.cache.maxsize == 7

    def test_reset_engine(self):
        first = get_engine()
        reset_engine()
        assert get_engine() is not first
