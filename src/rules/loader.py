from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

EXPECTED_SCHEMA_VERSION = 1


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e

    if rules.schema_version != EXPECTED_SCHEMA_VERSION:
        raise ValueError(
            f"Invalid schema_version: expected {EXPECTED_SCHEMA_VERSION}, "
            f"got {rules.schema_version}"
        )
    return rules
