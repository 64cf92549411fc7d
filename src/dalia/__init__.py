"""
dalia: shell "change directory" aliases from a small configuration file.

Each configuration line names a directory, optionally with a custom alias in
square brackets, or expands a directory's subdirectories with `[*]`.
"""

__version__ = "0.1.0"

from dalia.dalia_config import DaliaConfig
from dalia.dalia_error import (
    DaliaConfigError,
    DaliaDerivationError,
    DaliaEmptyInputError,
    DaliaError,
    DaliaExpansionError,
    DaliaParseError,
    DaliaTokenError,
)
from dalia.dalia_parser import DaliaParser
from dalia.dalia_printer import DaliaAliasPrinter
from dalia.dalia_token import DaliaToken, DaliaTokenType
from dalia.dalia_tokenizer import DaliaTokenizer

__all__ = [
    # Exceptions
    'DaliaError',
    'DaliaTokenError',
    'DaliaParseError',
    'DaliaDerivationError',
    'DaliaExpansionError',
    'DaliaEmptyInputError',
    'DaliaConfigError',
    # Types
    'DaliaToken',
    'DaliaTokenType',
    # Core classes
    'DaliaTokenizer',
    'DaliaParser',
    'DaliaConfig',
    'DaliaAliasPrinter',
]
