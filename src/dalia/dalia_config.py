"""Configuration file location and loading for dalia."""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping

from dalia.dalia_error import DaliaConfigError
from dalia.dalia_parser import DaliaParser


CONFIG_PATH_ENV_VAR = "DALIA_CONFIG_PATH"
DEFAULT_CONFIG_DIR = "~/.dalia"
CONFIG_FILE_NAME = "config"
EMPTY_CONFIG_MESSAGE = (
    "configuration file is empty; add a few paths to $DALIA_CONFIG_PATH/config and try again."
)


@dataclass
class DaliaConfig:
    """Location of the dalia configuration file."""

    config_dir: str
    config_file: str = field(default="")

    def __post_init__(self) -> None:
        if not self.config_file:
            self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> 'DaliaConfig':
        """
        Resolve the configuration location from the environment.

        DALIA_CONFIG_PATH names the configuration directory; when unset the
        directory defaults to ~/.dalia.
        """
        if environ is None:
            environ = os.environ

        config_dir = environ.get(CONFIG_PATH_ENV_VAR) or os.path.expanduser(DEFAULT_CONFIG_DIR)
        logging.getLogger("DaliaConfig").debug("using configuration directory %s", config_dir)
        return cls(config_dir=config_dir)

    @classmethod
    def from_file(cls, config_file: str) -> 'DaliaConfig':
        """Use an explicit configuration file."""
        return cls(config_dir=os.path.dirname(config_file), config_file=config_file)

    def read_text(self) -> str:
        """
        Read the configuration file.

        A missing file is treated the same as an empty one.

        Returns:
            The configuration text

        Raises:
            DaliaConfigError: If the file is missing, unreadable or empty
        """
        logger = logging.getLogger("DaliaConfig")
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                text = f.read()

        except FileNotFoundError:
            logger.debug("configuration file not found: %s", self.config_file)
            text = ""

        except OSError as e:
            raise DaliaConfigError(
                f"cannot read configuration file {self.config_file}: {e.strerror or e}",
                error_details={'config_file': self.config_file}
            ) from e

        except UnicodeDecodeError as e:
            raise DaliaConfigError(
                f"configuration file {self.config_file} is not valid UTF-8 text",
                error_details={'config_file': self.config_file}
            ) from e

        if not text.strip():
            raise DaliaConfigError(EMPTY_CONFIG_MESSAGE, error_details={'config_file': self.config_file})

        return text

    def load_aliases(self) -> Dict[str, str]:
        """Read and parse the configuration file into an alias map."""
        return DaliaParser(self.read_text()).parse()
