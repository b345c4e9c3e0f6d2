"""Core constants used across csv2json modules.

This module centralizes schema and formatting constants.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

EMPLOYEE_FIELD_NAMES = (
    "id",
    "first_name",
    "last_name",
    "email",
    "description",
    "role",
    "phone",
)
EMPLOYEE_FIELD_COUNT = len(EMPLOYEE_FIELD_NAMES)
CSV_EXTENSION = ".csv"
CSV_DELIMITER = ","
CSV_QUOTE_CHAR = '"'
CSV_FIELD_SIZE_LIMIT = 2147483647
DEFAULT_INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"
DEFAULT_JSON_INDENT = 4
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_TEMP_PREFIX = ".csv2json-"
OUTPUT_TEMP_SUFFIX = ".tmp"
