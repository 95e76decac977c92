"""Console sink for debugging and development."""

import json
from typing import Any

from estate_reports.sinks.serialization import to_dict


class ConsoleSink:
    """Output reports and records to console (stdout)."""

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        camel_case: bool = False,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        camel_case : bool
            Emit camelCase keys.
        """
        self.pretty = pretty
        self.max_records = max_records
        self.camel_case = camel_case
        self._counts: dict[str, int] = {}

    def write_report(self, name: str, report: Any) -> None:
        """Print one assembled report."""
        print(self._dumps(to_dict(report, self.camel_case)))
        self._counts[name] = self._counts.get(name, 0) + 1

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"Entity: {entity_type} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            print(self._dumps(to_dict(record, self.camel_case)))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _dumps(self, data: dict) -> str:
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)
