"""Utility modules."""
from ordquiz.utils.json_utils import (
    json_dump,
    read_json_file,
    write_json_file,
)
from ordquiz.utils.numbers import parse_limit, percentage_of, round_half_up

__all__ = [
    "json_dump",
    "read_json_file",
    "write_json_file",
    "parse_limit",
    "percentage_of",
    "round_half_up",
]
