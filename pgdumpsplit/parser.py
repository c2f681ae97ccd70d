"""
Line classification and marker comment parsing

These are pure functions, the :py:class:`~pgdumpsplit.splitter.Splitter`
calls them for every line of input.

"""
import logging

from pgdumpsplit import constants, exceptions, models

LOGGER = logging.getLogger(__name__)


def classify(line: str) -> models.Line:
    """Classify a single line of dump input.

    The marker pattern is checked before the generic comment pattern, since
    every marker comment is also a comment.

    :param line: The line, without its trailing newline
    :rtype: pgdumpsplit.models.Line

    """
    if constants.MARKER_COMMENT.search(line):
        return models.Line.MARKER_COMMENT
    elif constants.PREAMBLE_COMMENT.search(line):
        return models.Line.PREAMBLE_COMMENT
    elif line == constants.EMPTY_COMMENT:
        return models.Line.EMPTY_COMMENT
    elif line == '':
        return models.Line.EMPTY
    return models.Line.CONTENT


def parse_marker(line: str, line_number: int = 0) -> models.Entity:
    """Parse a marker comment into an entity.

    :param line: The marker comment line
    :param line_number: The position of the line in the input, used when
        reporting errors
    :raises: :py:exc:`~pgdumpsplit.exceptions.GarbledMarkerError`
    :rtype: pgdumpsplit.models.Entity

    """
    match = constants.MARKER_COMMENT.search(line)
    if not match:
        raise exceptions.GarbledMarkerError(line_number)
    name, entity_type, schema, owner = match.groups()
    try:
        entity_type = models.EntityType(entity_type)
    except ValueError:
        LOGGER.debug('Unknown entity type %r on line %i',
                      entity_type, line_number)
        raise exceptions.GarbledMarkerError(line_number)
    return models.Entity(
        name=name,
        entity_type=entity_type,
        schema=None if schema == constants.NO_SCHEMA else schema,
        owner=owner)


def extract_function_name(entity: models.Entity) -> str:
    """Return the function name without the argument list

    :param entity: A function entity
    :raises: :py:exc:`~pgdumpsplit.exceptions.GarbledFunctionNameError`
    :rtype: str

    """
    match = constants.FUNCTION_SIGNATURE.search(entity.name)
    if not match:
        raise exceptions.GarbledFunctionNameError(entity.name)
    return match.group(1)


def is_overload(first: models.Entity, second: models.Entity) -> bool:
    """Return :py:const:`True` if both functions share a schema and a bare
    name. The argument lists are not compared, so every overload of a
    function is grouped together.

    :raises: :py:exc:`~pgdumpsplit.exceptions.GarbledFunctionNameError`
    :rtype: bool

    """
    if first.schema != second.schema:
        return False
    return extract_function_name(first) == extract_function_name(second)
