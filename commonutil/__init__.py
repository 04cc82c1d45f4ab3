"""
Common Utilities Package

Small stateless helpers for lists, dicts, strings, dates and URLs.
Built for clarity, speed, and reuse.
"""

from .array import last, remove_of, uniq, uniq_by
from .data_structures import (
    Kind,
    assign_deep,
    assign_deep_exists,
    assign_deep_with_array,
    deep_copy,
    get_deep,
    invert,
    invert_by,
    is_empty,
    is_plain,
    kind_of,
    set_deep,
)
from .date import (
    DateLike,
    add,
    calc_age,
    compare_date_time,
    diff_time,
    format_date,
    get_day_num,
    get_utc_day_cn,
    is_leap_year,
    string2date,
    string2dtl,
    to_datetime,
)
from .strings import include_double_byte, length, trim, uppercase_first_letter
from .url import base64_pre, computed_url_params, current_url, get_url_params

__version__ = "0.1.0"
__all__ = [
    # Array helpers
    "last",
    "remove_of",
    "uniq",
    "uniq_by",
    # Container helpers
    "Kind",
    "kind_of",
    "deep_copy",
    "assign_deep",
    "assign_deep_exists",
    "assign_deep_with_array",
    "get_deep",
    "set_deep",
    "invert",
    "invert_by",
    "is_empty",
    "is_plain",
    # String helpers
    "include_double_byte",
    "length",
    "trim",
    "uppercase_first_letter",
    # Date helpers
    "DateLike",
    "to_datetime",
    "add",
    "diff_time",
    "calc_age",
    "format_date",
    "get_day_num",
    "get_utc_day_cn",
    "is_leap_year",
    "string2date",
    "string2dtl",
    "compare_date_time",
    # URL helpers
    "base64_pre",
    "computed_url_params",
    "get_url_params",
    "current_url",
]
