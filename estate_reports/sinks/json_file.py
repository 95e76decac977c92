"""JSON file sink for exporting reports and portfolios to files."""

import json
from pathlib import Path
from typing import Any

from estate_reports.sinks.serialization import to_dict


class JsonFileSink:
    """Output reports and records to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False, camel_case: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        camel_case : bool
            Emit camelCase keys.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self.camel_case = camel_case
        self._counts: dict[str, int] = {}

    def write_report(self, name: str, report: Any) -> Path:
        """Write one assembled report to ``<name>.json`` and return its path."""
        file_path = self.output_dir / f"{name}.json"
        self._dump(file_path, to_dict(report, self.camel_case))
        self._counts[name] = 1
        return file_path

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to a JSON file."""
        file_path = self.output_dir / f"{entity_type}.json"
        self._dump(file_path, [to_dict(record, self.camel_case) for record in records])
        self._counts[entity_type] = len(records)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _dump(self, file_path: Path, data: Any) -> None:
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)
