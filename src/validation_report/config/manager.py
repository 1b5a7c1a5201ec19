"""
Validator configuration.

Lists the validators to run against a project, where to import them from
and the options each one receives. Read from TOML or YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli
import yaml

from validation_report.errors import ConfigError


DEFAULT_CONFIG_NAME = "validators.toml"


@dataclass
class ValidatorSpec:
    """A single configured validator."""
    name: str
    path: str  # "package.module:Attribute"
    enabled: bool = True
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "ValidatorSpec":
        if not isinstance(data, dict):
            raise ConfigError(f"Validator entry must be a table, got {type(data).__name__}")

        name = data.get("name")
        path = data.get("class")
        if not isinstance(name, str) or not name:
            raise ConfigError("Validator entry is missing 'name'")
        if not isinstance(path, str) or not path:
            raise ConfigError(f"Validator '{name}' is missing 'class'")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigError(f"Validator '{name}': 'enabled' must be a boolean")

        options = data.get("options", {})
        if not isinstance(options, dict):
            raise ConfigError(f"Validator '{name}': 'options' must be a table")

        return cls(name=name, path=path, enabled=enabled, options=options)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "class": self.path, "enabled": self.enabled}
        # Only include options if any were given
        if self.options:
            data["options"] = self.options
        return data


@dataclass
class ValidatorConfig:
    """Configuration for a validation run."""
    validators: list[ValidatorSpec] = field(default_factory=list)
    strict: bool = False  # treat warnings as failures
    source: Path | None = None

    @property
    def enabled_validators(self) -> list[ValidatorSpec]:
        return [v for v in self.validators if v.enabled]

    @classmethod
    def from_dict(cls, data: Any, source: Path | None = None) -> "ValidatorConfig":
        if data is None:
            return cls(source=source)
        if not isinstance(data, dict):
            raise ConfigError("Validator config must be a mapping at the top level")

        entries = data.get("validators", [])
        if not isinstance(entries, list):
            raise ConfigError("'validators' must be a list of tables")

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError("'strict' must be a boolean")

        validators = [ValidatorSpec.from_dict(entry) for entry in entries]

        seen: set[str] = set()
        for spec in validators:
            if spec.name in seen:
                raise ConfigError(f"Duplicate validator name: {spec.name}")
            seen.add(spec.name)

        return cls(validators=validators, strict=strict, source=source)

    @classmethod
    def load(cls, path: Path | None = None) -> "ValidatorConfig":
        """
        Load config from file.

        Args:
            path: A .toml, .yaml or .yml file. Defaults to validators.toml in
                the current directory; a missing default yields an empty config.

        Returns:
            ValidatorConfig
        """
        if path is None:
            path = Path.cwd() / DEFAULT_CONFIG_NAME
            if not path.exists():
                return cls()

        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".toml":
            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        elif suffix in (".yaml", ".yml"):
            try:
                with open(path) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        else:
            raise ConfigError(f"Unsupported config format: {path.suffix or path.name}")

        return cls.from_dict(data, source=path)

    def save(self, path: Path) -> None:
        """Save config as YAML."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "strict": self.strict,
            "validators": [v.to_dict() for v in self.validators],
        }

        with open(path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
