"""Unit tests for the wildcard-aware string language."""

import pytest

from bai.policy.wildcard import compile_wildcard, matches_wildcard


class TestMatchesWildcard:
    """Tests for matches_wildcard."""

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [
            ("seda:*", "seda:orders"),
            ("seda:*", "seda:"),
            ("*", ""),
            ("ctx-?", "ctx-1"),
            ("org.acme.*", "org.acme.orders"),
            ("*orders*", "jms:queue:orders.in"),
            ("file:/tmp/(a)", "file:/tmp/(a)"),
        ],
    )
    def test_matches(self, pattern: str, text: str) -> None:
        assert matches_wildcard(pattern, text)

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [
            ("seda:*", "direct:seda:x"),
            ("ctx-?", "ctx-10"),
            ("ctx-?", "ctx-"),
            ("org.acme.*", "orgXacme.orders"),
            ("Orders", "orders"),
            ("mod", "mod-extra"),
        ],
    )
    def test_does_not_match(self, pattern: str, text: str) -> None:
        assert not matches_wildcard(pattern, text)

    def test_compiled_patterns_are_cached(self) -> None:
        assert compile_wildcard("jms:*") is compile_wildcard("jms:*")
