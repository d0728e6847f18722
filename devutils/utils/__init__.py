# devutils/utils/__init__.py
"""Utility package re-exporting shared helpers for devutils."""

from devutils.utils.aio import with_timeout
from devutils.utils.collections import (
    distinct_by,
    for_each,
    for_each_with_index,
    is_null_or_empty,
    random_item,
    to_concatenated_string,
)
from devutils.utils.dates import is_today, start_of_week, to_relative_time_string
from devutils.utils.files import file_size_string, to_safe_file_name
from devutils.utils.io import load_yaml
from devutils.utils.logger import get_logger
from devutils.utils.numeric import clamp, is_between, to_file_size_string
from devutils.utils.objects import as_type, deep_clone, json_default, to_json
from devutils.utils.strings import (
    is_null_or_whitespace,
    reverse,
    strip_html,
    to_camel_case,
    to_title_case,
    truncate,
    try_parse_number,
)

__all__ = [
    "as_type",
    "clamp",
    "deep_clone",
    "distinct_by",
    "file_size_string",
    "for_each",
    "for_each_with_index",
    "get_logger",
    "is_between",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "is_today",
    "json_default",
    "load_yaml",
    "random_item",
    "reverse",
    "start_of_week",
    "strip_html",
    "to_camel_case",
    "to_concatenated_string",
    "to_file_size_string",
    "to_json",
    "to_relative_time_string",
    "to_safe_file_name",
    "to_title_case",
    "truncate",
    "try_parse_number",
    "with_timeout",
]
