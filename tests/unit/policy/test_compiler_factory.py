"""Unit tests for the PolicyCompiler factory."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bai.config.models.policy import PolicyConfig
from bai.policy.factory import create_policy_compiler, create_property_source
from bai.sources.inmemory import InMemoryPropertySource
from bai.sources.toml import TomlPropertySource


class TestCreatePropertySource:
    """Tests for create_property_source."""

    def test_inmemory_backend(self) -> None:
        source = create_property_source(
            PolicyConfig(properties={"endpoint.exclude": "seda:*"})
        )
        assert isinstance(source, InMemoryPropertySource)
        assert source.get("endpoint.exclude") == "seda:*"

    def test_toml_backend(self, tmp_path: Path) -> None:
        policy_file = tmp_path / "policy.toml"
        policy_file.write_text('endpoint.exclude = "seda:*"\n')

        source = create_property_source(PolicyConfig(source="toml", path=policy_file))

        assert isinstance(source, TomlPropertySource)
        assert list(source.keys()) == ["endpoint.exclude"]

    def test_toml_backend_requires_path(self) -> None:
        with pytest.raises(ValidationError):
            PolicyConfig(source="toml")

    def test_toml_backend_without_path_raises_value_error(self) -> None:
        """The factory rejects an unvalidated config that lacks a path."""
        config = PolicyConfig.model_construct(source="toml", path=None)

        with pytest.raises(ValueError, match="requires a path"):
            create_property_source(config)


class TestCreatePolicyCompiler:
    """Tests for create_policy_compiler."""

    def test_compiles_configured_properties(self) -> None:
        compiler = create_policy_compiler(
            PolicyConfig(properties={
                "camelContext.exclude": "audit-ctx",
                "endpoint.include/orders*": "jms:*",
            })
        )
        assert len(compiler.compile()) == 2

    def test_passes_skip_malformed_keys(self) -> None:
        compiler = create_policy_compiler(
            PolicyConfig(
                properties={"endpoint.include": "jms:*", "event.include": "ctx"},
                skip_malformed_keys=True,
            )
        )
        assert len(compiler.compile()) == 1
