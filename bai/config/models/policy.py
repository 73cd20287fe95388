"""Policy compiler configuration models."""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from bai.config.loader import flatten_keys

PropertySourceBackend = Literal["inmemory", "toml"]


class PolicyConfig(BaseModel):
    """Where policy keys come from and how strictly they are compiled."""

    source: PropertySourceBackend = Field(
        default="inmemory",
        description="Property source backend",
    )
    path: Path | None = Field(
        default=None,
        description="Policy file for the toml backend",
    )
    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Inline policy keys for the inmemory backend",
    )
    skip_malformed_keys: bool = Field(
        default=False,
        description="Log and skip structurally malformed keys instead of failing the compile",
    )

    @field_validator("properties", mode="before")
    @classmethod
    def flatten_properties(cls, value: Any) -> Any:
        """Accept policy keys written as TOML dotted keys (nested tables)."""
        if not isinstance(value, dict):
            return value
        return {
            key: " ".join(item) if _is_string_list(item) else item
            for key, item in flatten_keys(value).items()
        }

    @model_validator(mode="after")
    def require_path_for_toml(self) -> "PolicyConfig":
        if self.source == "toml" and self.path is None:
            raise ValueError("policy.path is required when policy.source is 'toml'")
        return self


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)
