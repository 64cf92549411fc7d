"""Token types and token representation for dalia configuration files."""

from dataclasses import dataclass
from enum import Enum


class DaliaTokenType(Enum):
    """Token types for dalia configuration files."""
    EOF = "<EOF>"
    LBRACK = "LBRACK"
    RBRACK = "RBRACK"
    ALIAS = "ALIAS"
    PATH = "PATH"
    GLOB = "GLOB"


@dataclass(frozen=True)
class DaliaToken:
    """Represents a single token in a dalia configuration file."""
    type: DaliaTokenType
    value: str
    position: int = 0

    def __str__(self) -> str:
        return f"<'{self.value}', {self.type.value}>"

    def __repr__(self) -> str:
        return f"DaliaToken({self.type.name}, {self.value!r}, pos={self.position})"
