"""Output sinks for assembled reports and preview portfolios."""

from estate_reports.sinks.console import ConsoleSink
from estate_reports.sinks.json_file import JsonFileSink
from estate_reports.sinks.serialization import serialize_value, to_dict

__all__ = ["ConsoleSink", "JsonFileSink", "serialize_value", "to_dict"]
