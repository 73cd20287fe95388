"""Unit tests for bootstrap."""

from pathlib import Path

import pytest

from bai.bootstrap import bootstrap
from bai.config.models import LoggingConfig, ObservabilityConfig, PolicyConfig
from bai.config.settings import Settings
from bai.policy.compiler import CompilerState
from bai.policy.enums import ActionType


class TestBootstrap:
    """Tests for bootstrap."""

    def test_with_explicit_settings(self) -> None:
        settings = Settings(
            policy=PolicyConfig(properties={"camelContext.exclude": "audit-ctx"}),
            observability=ObservabilityConfig(logging=LoggingConfig(format="console")),
        )

        compiler = bootstrap(settings)

        assert compiler.state is CompilerState.UNINITIALIZED
        policy_set = compiler.compile()
        assert policy_set[0].action is ActionType.EXCLUDE

    def test_loads_settings_from_config_dir(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        policy_file = test_config_dir / "policy.toml"
        policy_file.write_text('endpoint."exclude/orders*" = "seda:*"\n')
        mock_toml_files({
            "default.toml": f'[policy]\nsource = "toml"\npath = "{policy_file.as_posix()}"\n',
        })
        monkeypatch.setenv("BAI_CONFIG_DIR", str(test_config_dir))

        policy_set = bootstrap().compile()

        assert len(policy_set) == 1
        assert policy_set[0].source_key == "endpoint.exclude/orders*"
