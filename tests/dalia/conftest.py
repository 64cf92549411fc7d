"""Shared fixtures and utilities for dalia tests."""

from pathlib import Path
from typing import Callable, Dict, List

import pytest

from dalia.dalia_parser import DaliaParser
from dalia.dalia_token import DaliaToken, DaliaTokenType
from dalia.dalia_tokenizer import DaliaTokenizer


@pytest.fixture
def parse() -> Callable[[str], Dict[str, str]]:
    """Parse configuration text with a fresh parser."""
    def _parse(text: str) -> Dict[str, str]:
        return DaliaParser(text).parse()
    return _parse


@pytest.fixture
def tokenize() -> Callable[[str], List[DaliaToken]]:
    """Tokenize text into a list of tokens, excluding the end-of-input token."""
    def _tokenize(text: str) -> List[DaliaToken]:
        return [t for t in DaliaTokenizer(text) if t.type != DaliaTokenType.EOF]
    return _tokenize


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A directory holding subdirectories one, two and three plus a file."""
    root = tmp_path / "X"
    root.mkdir()
    for name in ("one", "two", "three"):
        (root / name).mkdir()

    (root / "file.txt").write_text("not a directory\n")
    return root


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A configuration directory pointed to by DALIA_CONFIG_PATH."""
    directory = tmp_path / "dalia-config"
    directory.mkdir()
    monkeypatch.setenv("DALIA_CONFIG_PATH", str(directory))
    return directory
