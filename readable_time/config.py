"""Loading formatting options from a JSON file."""

import json
from pathlib import Path
from typing import Optional

import structlog

from readable_time.exceptions import ConfigurationError, InvalidOptionsError
from readable_time.options import DEFAULT_OPTIONS, FormatOptions

logger = structlog.get_logger()


def load_options(config_file: Optional[Path] = None) -> FormatOptions:
    """Read FormatOptions from a JSON object file.

    Keys may use camelCase (``convertToWords``) or snake_case. With no file
    the defaults are returned.

    Raises:
        ConfigurationError: the file is missing, unreadable, not a JSON
            object, or holds invalid options.
    """
    if config_file is None:
        return DEFAULT_OPTIONS

    if not config_file.exists():
        raise ConfigurationError(f"Options file not found: {config_file}")

    try:
        data = json.loads(config_file.read_text())
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Failed to read options file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Options file {config_file} must contain a JSON object, got {type(data).__name__}"
        )

    try:
        options = FormatOptions.from_mapping(data)
    except InvalidOptionsError as e:
        raise ConfigurationError(f"Invalid options in {config_file}: {e}") from e

    logger.debug("Options loaded", path=str(config_file), keys=sorted(data))
    return options
