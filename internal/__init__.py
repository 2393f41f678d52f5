from utils.timestamp import now_micros, format_timestamp
from internal.logging import LogLevel, StructuredLogger, get_logger, parse_level

__all__ = [
    "now_micros",
    "format_timestamp",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "parse_level",
]
