"""
Constants used when splitting a plain-text :command:`pg_dump` file.

"""
import re

DEFAULT_PREAMBLE_NAME: str = 'preamble.sql'
"""File in the base directory that receives the dump's leading statements"""

ENV_BASE_DIR: str = 'PGDUMPSPLIT_BASE_DIR'
ENV_PREAMBLE_NAME: str = 'PGDUMPSPLIT_PREAMBLE_NAME'

EMPTY_COMMENT: str = '--'
NO_SCHEMA: str = '-'
"""Schema field value printed by pg_dump for objects without a schema"""

SQL_SUFFIX: str = '.sql'

EVENT_TRIGGER_FOLDER: str = 'event_triggers'
EXTENSION_FOLDER: str = 'extensions'
ROLE_FOLDER: str = 'roles'
SCHEMA_FOLDER: str = 'schemas'

FUNCTION_FOLDER: str = 'functions'
TABLE_FOLDER: str = 'tables'
TYPE_FOLDER: str = 'types'
VIEW_FOLDER: str = 'views'

MARKER_COMMENT: re.Pattern = re.compile(
    r'Name:\s([^;]*);\sType:\s([^;]*);\sSchema:\s([^;]*);\sOwner:\s([^;]*)')
"""Object marker written by pg_dump ahead of each entry's definition"""

PREAMBLE_COMMENT: re.Pattern = re.compile(r'--.+')

FUNCTION_SIGNATURE: re.Pattern = re.compile(r'([^(]*)(\([^)]*\))')

ARROW_TIMESTAMP_FMT: str = 'YYYY-MM-DD HH:mm:ss'
