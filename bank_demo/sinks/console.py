"""Console sink for statements and account listings."""

import json
import sys
from typing import Any, TextIO

from bank_demo.config import OUTPUT_FORMATS
from bank_demo.exceptions import ConfigurationError
from bank_demo.models import AccountSummary, Statement
from bank_demo.sinks.serialization import serialize_value, to_dict


class ConsoleSink:
    """Write bank output to a text stream (stdout by default)."""

    def __init__(
        self,
        format: str = "text",
        pretty: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        format : str
            ``"text"`` for human readable lines, ``"json"`` for one JSON
            document per record.
        pretty : bool
            Indent JSON output.
        stream : TextIO | None
            Destination stream. Resolved to ``sys.stdout`` at write time
            when omitted.
        """
        if format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format {format!r}")
        self.format = format
        self.pretty = pretty
        self._stream = stream
        self._counts: dict[str, int] = {}

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write_message(self, message: str) -> None:
        """Write a free-form progress message."""
        if self.format == "json":
            self._emit_json({"type": "message", "message": message})
        else:
            self._print(message)
        self._count("messages")

    def write_statement(self, statement: Statement) -> None:
        """Write a single account statement."""
        if self.format == "json":
            self._emit_json({"type": "statement", **to_dict(statement)})
        else:
            for line in statement.lines():
                self._print(line)
            self._print("")
        self._count("statements")

    def write_accounts(self, bank_name: str, summaries: list[AccountSummary]) -> None:
        """Write a bank's account listing."""
        if self.format == "json":
            self._emit_json(
                {
                    "type": "accounts",
                    "bank": bank_name,
                    "accounts": serialize_value(summaries),
                }
            )
        else:
            header = f"=== Accounts of {bank_name} ==="
            self._print(header)
            for summary in summaries:
                self._print(str(summary))
            self._print("=" * len(header))
        self._count("listings")

    def close(self) -> None:
        """Print summary counts."""
        if self.format == "json":
            self._emit_json({"type": "summary", "counts": dict(self._counts)})
            return
        self._print(f"\n{'=' * 40}")
        self._print("Console Sink Summary")
        self._print("=" * 40)
        for record_type, count in self._counts.items():
            self._print(f"  {record_type}: {count}")

    def _emit_json(self, data: dict[str, Any]) -> None:
        indent = 2 if self.pretty else None
        self._print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))

    def _print(self, line: str) -> None:
        print(line, file=self.stream)

    def _count(self, record_type: str) -> None:
        self._counts[record_type] = self._counts.get(record_type, 0) + 1
