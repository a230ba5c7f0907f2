"""
Command-line interface for validating field values against a rules file.

Usage:
    fieldguard check --rules <rules.yaml> --data <values.yaml|json> [options]
    fieldguard kinds
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from fieldguard.core.exceptions import ValidatorConfigurationError
from fieldguard.core.rules import RuleConfigLoader, Validator
from fieldguard.observability.logger import log_operation, setup_logger

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2


def load_values(data_path: Path) -> dict[str, Any]:
    """
    Load field values from a YAML or JSON file.

    Args:
        data_path: Path to a mapping of field name to value

    Returns:
        Field values keyed by name

    Raises:
        ValueError: If the file does not hold a mapping
    """
    # JSON is a subset of YAML, one loader covers both
    with open(data_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Data file must contain a mapping of field names to values: {data_path}")
    return {str(key): value for key, value in data.items()}


def check_command(args, logger) -> int:
    """
    Execute the check command.

    Args:
        args: Command-line arguments
        logger: Configured logger

    Returns:
        Process exit code
    """
    try:
        loader = RuleConfigLoader(args.rules)
        rules = loader.load_rules()
        config = loader.load_settings()
        values = load_values(Path(args.data))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Could not load input: {e}")
        return EXIT_USAGE

    for protocol in args.allow_protocol or []:
        config.allowed_url_protocols.add(protocol)

    try:
        with log_operation("Validating fields", logger=logger, rules_file=str(args.rules)):
            validator = Validator.from_rules(rules, values, config)
            validator.run()
    except ValidatorConfigurationError as e:
        logger.error(f"Invalid rule configuration: {e}")
        return EXIT_USAGE

    result = validator.result()

    if args.output == "json":
        print(result.model_dump_json(indent=2))
    elif result.passed:
        print(f"OK: {result.fields_checked} field(s) passed")
    else:
        for field_name, messages in result.errors_by_field().items():
            for message in messages:
                print(f"{field_name}: {message}")

    return EXIT_OK if result.passed else EXIT_FAILURES


def kinds_command(args) -> int:
    """Print the rule kinds the engine understands."""
    kinds = Validator.list_validations()
    if args.output == "json":
        print(json.dumps(kinds))
    else:
        for kind in kinds:
            print(kind)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldguard",
        description="Validate field values against declarative rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a form submission
  fieldguard check --rules config/signup_rules.yaml --data submission.json

  # Emit failures as JSON
  fieldguard check --rules config/signup_rules.yaml --data submission.yaml --output json

  # Accept ftp:// links in url rules
  fieldguard check --rules rules.yaml --data data.yaml --allow-protocol ftp

  # List rule kinds
  fieldguard kinds
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)"
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=["json", "text"],
        help="Log output format (default: text)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate a data file")
    check_parser.add_argument(
        "--rules",
        required=True,
        help="Path to rules YAML file"
    )
    check_parser.add_argument(
        "--data",
        required=True,
        help="Path to field values (YAML or JSON mapping)"
    )
    check_parser.add_argument(
        "--output",
        default="text",
        choices=["text", "json"],
        help="Result format (default: text)"
    )
    check_parser.add_argument(
        "--allow-protocol",
        action="append",
        metavar="SCHEME",
        help="Extra URL scheme to accept (repeatable)"
    )

    kinds_parser = subparsers.add_parser("kinds", help="List rule kinds")
    kinds_parser.add_argument(
        "--output",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    logger = setup_logger("fieldguard", level=args.log_level, format_type=args.log_format)

    if args.command == "check":
        return check_command(args, logger)
    if args.command == "kinds":
        return kinds_command(args)
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
