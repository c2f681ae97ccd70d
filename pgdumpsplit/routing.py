"""
Routing Table
=============
Maps each :py:class:`~pgdumpsplit.models.EntityType` to where the object's
definition is written.

"""
import dataclasses
import enum
import typing

from pgdumpsplit import constants
from pgdumpsplit.models import EntityType


class Destination(enum.Enum):
    """How the output file for an entity is chosen"""
    FUNCTION = 'function'
    """``schemas/<schema>/<folder>/<schema>.<bare name>.sql``, overloads
    are grouped into one file"""
    SCHEMA_OBJECT = 'schema-object'
    """``schemas/<schema>/<folder>/<schema>.<name>.sql``"""
    SCHEMA = 'schema'
    """``schemas/<name>/<name>.sql``"""
    NAMED = 'named'
    """``<folder>/<name>.sql``"""
    OWNED = 'owned'
    """``<folder>/<owner>.sql``"""
    DISCARD = 'discard'
    """The object body is not written"""


@dataclasses.dataclass(frozen=True)
class Route:
    """A single entry of the routing table

    :var requires_schema: Objects of this type are filed under
        ``schemas/<schema>`` and their marker must carry a schema
    :var destination: How the output file is chosen
    :var folder: The folder the output file is created in, if any

    """
    requires_schema: bool
    destination: Destination
    folder: typing.Optional[str] = None


_DISCARD_GLOBAL = Route(False, Destination.DISCARD)
_DISCARD_SCHEMA = Route(True, Destination.DISCARD)

ROUTES: typing.Dict[EntityType, Route] = {
    EntityType.ACL: _DISCARD_GLOBAL,
    EntityType.AGGREGATE: _DISCARD_SCHEMA,
    EntityType.CHECK_CONSTRAINT: _DISCARD_SCHEMA,
    EntityType.COMMENT: _DISCARD_GLOBAL,
    EntityType.CONSTRAINT: _DISCARD_SCHEMA,
    EntityType.DATABASE: _DISCARD_GLOBAL,
    EntityType.DEFAULT: _DISCARD_SCHEMA,
    EntityType.DEFAULT_ACL: Route(
        False, Destination.OWNED, constants.ROLE_FOLDER),
    EntityType.DOMAIN: _DISCARD_SCHEMA,
    EntityType.EVENT_TRIGGER: Route(
        False, Destination.NAMED, constants.EVENT_TRIGGER_FOLDER),
    EntityType.EXTENSION: Route(
        False, Destination.NAMED, constants.EXTENSION_FOLDER),
    EntityType.FK_CONSTRAINT: _DISCARD_SCHEMA,
    EntityType.FOREIGN_TABLE: _DISCARD_SCHEMA,
    EntityType.FUNCTION: Route(
        True, Destination.FUNCTION, constants.FUNCTION_FOLDER),
    EntityType.INDEX: _DISCARD_SCHEMA,
    EntityType.MATERIALIZED_VIEW: _DISCARD_SCHEMA,
    EntityType.MATERIALIZED_VIEW_DATA: _DISCARD_SCHEMA,
    EntityType.POLICY: _DISCARD_SCHEMA,
    EntityType.ROW_SECURITY: _DISCARD_SCHEMA,
    EntityType.RULE: _DISCARD_SCHEMA,
    EntityType.SCHEMA: Route(False, Destination.SCHEMA),
    EntityType.SEQUENCE: _DISCARD_SCHEMA,
    EntityType.SEQUENCE_OWNED_BY: _DISCARD_SCHEMA,
    EntityType.SEQUENCE_SET: _DISCARD_SCHEMA,
    EntityType.TABLE: Route(
        True, Destination.SCHEMA_OBJECT, constants.TABLE_FOLDER),
    EntityType.TABLE_DATA: _DISCARD_SCHEMA,
    EntityType.TRIGGER: _DISCARD_SCHEMA,
    EntityType.TYPE: Route(
        True, Destination.SCHEMA_OBJECT, constants.TYPE_FOLDER),
    EntityType.VIEW: Route(
        True, Destination.SCHEMA_OBJECT, constants.VIEW_FOLDER),
}


def route_for(entity_type: EntityType) -> Route:
    """Return the route for the entity type

    :raises: :py:exc:`KeyError` if the routing table is missing the type

    """
    return ROUTES[entity_type]
