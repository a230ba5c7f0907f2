"""
Unit tests for rule configuration loading and building.
"""

import pytest

from fieldguard.core.rules import RuleConfigBuilder, RuleConfigLoader, Validator


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_rules_from_yaml(self, rules_file):
        path = rules_file(
            """
rules:
  name: "required|min[3]|max[40]"
  website:
    - url
    - max[200]
  zip: zip
"""
        )

        rules = RuleConfigLoader(path).load_rules()

        assert rules == {
            "name": "required|min[3]|max[40]",
            "website": "url|max[200]",
            "zip": "zip",
        }
        assert list(rules) == ["name", "website", "zip"]

    def test_load_settings(self, rules_file):
        path = rules_file(
            """
settings:
  allowed_url_protocols: [http, https, ftp]
  default_date_format: Y-m-d
  mx_lookup_timeout: 3
rules:
  site: url
"""
        )

        config = RuleConfigLoader(path).load_settings()

        assert config.allowed_url_protocols == {"http", "https", "ftp"}
        assert config.default_date_format == "Y-m-d"
        assert config.mx_lookup_timeout == 3.0

    def test_settings_default_when_absent(self, rules_file):
        path = rules_file("rules:\n  name: required\n")
        assert RuleConfigLoader(path).load_settings().allowed_url_protocols == {"http", "https"}

    def test_invalid_settings(self, rules_file):
        path = rules_file("settings:\n  mx_lookup_timeout: -1\nrules:\n  name: required\n")

        with pytest.raises(ValueError, match="Invalid settings"):
            RuleConfigLoader(path).load_settings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "nope.yaml")

    def test_missing_rules_section(self, rules_file):
        path = rules_file("settings: {}\n")

        with pytest.raises(ValueError, match="'rules' section"):
            RuleConfigLoader(path).load_rules()

    @pytest.mark.parametrize("rule_def", ["42", "{min: 3}", "''", "[]"])
    def test_malformed_field_rules(self, rules_file, rule_def):
        path = rules_file(f"rules:\n  name: {rule_def}\n")

        with pytest.raises(ValueError, match="field 'name'"):
            RuleConfigLoader(path).load_rules()


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_build(self):
        rules = RuleConfigBuilder() \
            .add_required("name") \
            .add_length("name", min_length=3, max_length=40) \
            .add_email("email", check_hostname=False) \
            .add_ip("server", v4=True, reject_private=True) \
            .add_ip("any_ip") \
            .add_type_check("age", "int") \
            .add_url("site") \
            .add_phone("phone") \
            .add_zip("zip") \
            .add_date("born", "Y-m-d") \
            .add_length("code", exact_length=4) \
            .build()

        assert rules == {
            "name": "required|min[3]|max[40]",
            "email": "email[no_hostname_check]",
            "server": "ip[v4,reject_private]",
            "any_ip": "ip",
            "age": "is[int]",
            "site": "url",
            "phone": "phone",
            "zip": "zip",
            "born": "date[format=Y-m-d]",
            "code": "exact[4]",
        }

    def test_built_rules_drive_the_engine(self):
        rules = RuleConfigBuilder() \
            .add_required("name") \
            .add_length("name", min_length=3) \
            .add_zip("zip") \
            .build()

        validator = Validator.from_rules(rules, {"name": "Al", "zip": "03100"})

        assert validator.run() is False
        assert [(f.field, f.message) for f in validator.get_failures()] == [("name", "Too short")]
