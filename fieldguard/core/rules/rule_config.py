"""
Rule configuration management.

Loads field rule strings from YAML files and provides a builder for
assembling them programmatically.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fieldguard.core.engine_config import EngineConfig
from fieldguard.core.rules.grammar import RULE_SEPARATOR


class RuleConfigLoader:
    """
    Loads field rules and engine settings from a YAML configuration file.

    Expected YAML format:
    ```yaml
    settings:
      allowed_url_protocols: [http, https, ftp]
      default_date_format: d/m/Y

    rules:
      name: "required|min[3]|max[40]"
      email: "required|email[no_hostname_check]"
      website:
        - url
      zip: zip
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")
        self._config: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._config is None:
            with open(self.config_path) as f:
                config = yaml.safe_load(f)

            if not isinstance(config, dict) or "rules" not in config:
                raise ValueError("Configuration file must contain 'rules' section")
            self._config = config
        return self._config

    def load_rules(self) -> dict[str, str]:
        """
        Load field rules from the YAML file.

        Returns:
            Mapping of field name to pipe-separated rule string, in file order

        Raises:
            ValueError: If the rules section is malformed
        """
        field_rules = self._load()["rules"]
        if not isinstance(field_rules, dict):
            raise ValueError("'rules' section must map field names to rule strings")

        rules = {}
        for field_name, rule_def in field_rules.items():
            rules[str(field_name)] = self._parse_rule(str(field_name), rule_def)
        return rules

    def _parse_rule(self, field_name: str, rule_def: Any) -> str:
        """
        Normalize one field's rule definition into a rule string.

        Args:
            field_name: The field the rules apply to
            rule_def: A rule string or a list of rule specs

        Returns:
            Pipe-separated rule string

        Raises:
            ValueError: If the definition is empty or of the wrong type
        """
        if isinstance(rule_def, str):
            specs = [rule_def]
        elif isinstance(rule_def, list) and all(isinstance(spec, str) for spec in rule_def):
            specs = rule_def
        else:
            raise ValueError(f"Rules for field '{field_name}' must be a string or a list of strings")

        rule_string = RULE_SEPARATOR.join(spec.strip() for spec in specs)
        if not rule_string.strip():
            raise ValueError(f"Rules for field '{field_name}' are empty")
        return rule_string

    def load_settings(self) -> EngineConfig:
        """
        Load engine settings from the optional ``settings`` section.

        Raises:
            ValueError: If a setting has an invalid value
        """
        settings = self._load().get("settings") or {}
        if not isinstance(settings, dict):
            raise ValueError("'settings' section must be a mapping")

        try:
            return EngineConfig(**settings)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {self.config_path}: {e}") from e


class RuleConfigBuilder:
    """
    Programmatically build field rules (for testing or dynamic forms).

    Usage:
        rules = RuleConfigBuilder() \\
            .add_required("name") \\
            .add_length("name", min_length=3, max_length=40) \\
            .add_zip("zip") \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str, list[str]] = {}

    def add_rule(self, field_name: str, spec: str) -> "RuleConfigBuilder":
        """Add a raw rule spec such as ``min[3]``."""
        self.rules.setdefault(field_name, []).append(spec)
        return self

    def add_required(self, field_name: str) -> "RuleConfigBuilder":
        """Add a required rule."""
        return self.add_rule(field_name, "required")

    def add_length(
        self,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
        exact_length: int | None = None,
    ) -> "RuleConfigBuilder":
        """Add length bounds."""
        if min_length is not None:
            self.add_rule(field_name, f"min[{min_length}]")
        if max_length is not None:
            self.add_rule(field_name, f"max[{max_length}]")
        if exact_length is not None:
            self.add_rule(field_name, f"exact[{exact_length}]")
        return self

    def add_email(self, field_name: str, check_hostname: bool = True) -> "RuleConfigBuilder":
        """Add an email rule."""
        return self.add_rule(field_name, "email" if check_hostname else "email[no_hostname_check]")

    def add_type_check(self, field_name: str, type_name: str) -> "RuleConfigBuilder":
        """Add an ``is`` rule (int, bool or null)."""
        return self.add_rule(field_name, f"is[{type_name}]")

    def add_ip(
        self,
        field_name: str,
        v4: bool = False,
        v6: bool = False,
        reject_private: bool = False,
    ) -> "RuleConfigBuilder":
        """Add an IP rule."""
        flags = [name for name, enabled in (("v4", v4), ("v6", v6), ("reject_private", reject_private)) if enabled]
        return self.add_rule(field_name, f"ip[{','.join(flags)}]" if flags else "ip")

    def add_url(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "url")

    def add_phone(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "phone")

    def add_zip(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "zip")

    def add_date(self, field_name: str, date_format: str | None = None) -> "RuleConfigBuilder":
        """Add a date rule, optionally with a PHP-style format."""
        return self.add_rule(field_name, f"date[format={date_format}]" if date_format else "date")

    def build(self) -> dict[str, str]:
        """Build and return the field -> rule string mapping."""
        return {field_name: RULE_SEPARATOR.join(specs) for field_name, specs in self.rules.items()}
