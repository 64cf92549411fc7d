"""Rendering of alias maps as shell alias statements, JSON or YAML."""

import json
import shlex
from typing import Dict, List

import yaml


OUTPUT_FORMATS = ('shell', 'json', 'yaml')


class DaliaAliasPrinter:
    """Formats an alias map for output."""

    def format(self, aliases: Dict[str, str], output_format: str = 'shell') -> str:
        """
        Format aliases in the requested output format.

        Args:
            aliases: Mapping of alias name to path
            output_format: One of 'shell', 'json' or 'yaml'

        Returns:
            Formatted text, ending in a newline unless there is nothing to print

        Raises:
            ValueError: If the output format is not recognized
        """
        if output_format == 'shell':
            return self._format_shell(aliases)

        if output_format == 'json':
            return json.dumps(aliases, indent=2, sort_keys=True) + "\n"

        if output_format == 'yaml':
            return yaml.safe_dump(aliases, default_flow_style=False, sort_keys=True)

        raise ValueError(f"Unknown output format: {output_format}")

    def alias_statement(self, alias: str, path: str) -> str:
        """
        Build the shell statement for a single alias.

        Names that are not plain shell words are quoted so that the shell
        rejects them as invalid aliases instead of running any part of them.
        """
        escaped_path = path.replace("'", "'\\''")
        return f"alias {shlex.quote(alias)}='cd {escaped_path}'"

    def _format_shell(self, aliases: Dict[str, str]) -> str:
        lines: List[str] = [self.alias_statement(alias, aliases[alias]) for alias in sorted(aliases)]
        if not lines:
            return ""

        return "\n".join(lines) + "\n"
