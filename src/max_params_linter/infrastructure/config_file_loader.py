"""Load max-params options from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

from max_params_linter.domain.constants import CONFIG_SECTION
from max_params_linter.domain.exceptions import InvalidOptionsError

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads the raw option value from the nearest pyproject.toml.

    Accepts a `[tool.max-params]` table or `max-params = N` under `[tool]`.
    """

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        """Search upward from start (default: cwd) for pyproject.toml."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_raw_option(config_file: Path) -> object:
        """Return the raw max-params option from config_file, or None when unset."""
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except OSError:
            logging.debug("max-params: cannot read %s, using defaults", config_file)
            return None
        except toml_lib.TOMLDecodeError as exc:
            raise InvalidOptionsError(f"{config_file}: invalid TOML ({exc})") from exc
        tool_section = data.get("tool")
        if not isinstance(tool_section, Mapping):
            return None
        return tool_section.get(CONFIG_SECTION)

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> object:
        """Raw option from the nearest pyproject.toml; None when there is none."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return None
        logging.debug("max-params: reading options from %s", config_file)
        return ConfigFileLoader.load_raw_option(config_file)
