import dataclasses
import enum
import typing

import arrow


class EntityType(enum.Enum):
    """The object types pg_dump names in the ``Type`` field of a marker
    comment. The value of each member is the exact string pg_dump prints.

    """
    ACL = 'ACL'
    AGGREGATE = 'AGGREGATE'
    COMMENT = 'COMMENT'
    CHECK_CONSTRAINT = 'CHECK CONSTRAINT'
    CONSTRAINT = 'CONSTRAINT'
    DATABASE = 'DATABASE'
    DEFAULT = 'DEFAULT'
    DEFAULT_ACL = 'DEFAULT ACL'
    DOMAIN = 'DOMAIN'
    EVENT_TRIGGER = 'EVENT TRIGGER'
    EXTENSION = 'EXTENSION'
    FK_CONSTRAINT = 'FK CONSTRAINT'
    FOREIGN_TABLE = 'FOREIGN TABLE'
    FUNCTION = 'FUNCTION'
    INDEX = 'INDEX'
    MATERIALIZED_VIEW = 'MATERIALIZED VIEW'
    MATERIALIZED_VIEW_DATA = 'MATERIALIZED VIEW DATA'
    POLICY = 'POLICY'
    ROW_SECURITY = 'ROW SECURITY'
    RULE = 'RULE'
    SCHEMA = 'SCHEMA'
    SEQUENCE = 'SEQUENCE'
    SEQUENCE_OWNED_BY = 'SEQUENCE OWNED BY'
    SEQUENCE_SET = 'SEQUENCE SET'
    TABLE = 'TABLE'
    TABLE_DATA = 'TABLE DATA'
    TRIGGER = 'TRIGGER'
    TYPE = 'TYPE'
    VIEW = 'VIEW'


class Line(enum.Enum):
    """Classification of a single line of dump input"""
    MARKER_COMMENT = 'marker-comment'
    PREAMBLE_COMMENT = 'preamble-comment'
    EMPTY_COMMENT = 'empty-comment'
    EMPTY = 'empty'
    CONTENT = 'content'


class Mode(enum.Enum):
    PREAMBLE = 'preamble'
    BODY = 'body'


@dataclasses.dataclass(frozen=True)
class Entity:
    """The entity model represents a single parsed marker comment

    :var name: The object name as printed in the marker. For functions this
        is the full signature, including the argument types.
    :var entity_type: The type of the object
    :var schema: The schema the object lives in, :py:const:`None` when the
        marker carries pg_dump's ``-`` placeholder
    :var owner: The role that owns the object

    """
    name: str
    entity_type: EntityType
    schema: typing.Optional[str]
    owner: str


@dataclasses.dataclass
class DumpHeader:
    """Metadata pg_dump writes as comments at the top and bottom of a dump

    :var server_version: Version of the server the dump was taken from
    :var dump_version: Version of the pg_dump binary that wrote the dump
    :var started_at: When the dump was started (verbose dumps only)
    :var completed_at: When the dump completed (verbose dumps only)

    """
    server_version: typing.Optional[str] = None
    dump_version: typing.Optional[str] = None
    started_at: typing.Optional[arrow.Arrow] = None
    completed_at: typing.Optional[arrow.Arrow] = None


@dataclasses.dataclass
class Summary:
    """Describes what a single run of the splitter did

    :var header: Metadata found in the dump's informational comments
    :var lines: Number of input lines processed
    :var markers: Number of marker comments processed
    :var discarded: Number of markers whose body was not written
    :var files: Relative paths of the files written, in the order they were
        first opened

    """
    header: DumpHeader = dataclasses.field(default_factory=DumpHeader)
    lines: int = 0
    markers: int = 0
    discarded: int = 0
    files: typing.List[str] = dataclasses.field(default_factory=list)
