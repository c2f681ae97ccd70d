"""
The :py:class:`~pgdumpsplit.splitter.Splitter` class drives the split of a
plain-text :command:`pg_dump` file. Lines are processed one at a time:

- Until the first statement followed by a blank line, the dump is in its
  preamble and only statements are written, to the preamble file.
- After that, each marker comment chooses the file that the lines following
  it are written to, as determined by the
  :py:data:`routing table <pgdumpsplit.routing.ROUTES>`. The bodies of
  objects that are not split out are discarded.

Overloads of a function that follow each other in the dump are written to
the same file, separated by a blank line. An overload that arrives after a
discarded body, such as a comment on the previous overload, reopens that
file and is appended to it.

"""
import dataclasses
import logging
import pathlib
import typing

from pgdumpsplit import constants, exceptions, header, models, output, parser
from pgdumpsplit.routing import Destination, Route, route_for

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass
class State:
    """The parsing state carried from one line to the next

    :var mode: Whether the preamble has ended
    :var previous_line: The classification of the prior line
    :var previous_marker: The last schema scoped entity seen, used to group
        function overloads
    :var skip_next_empty_line: Drop the next blank line, set by every marker
    :var line_number: The 1-based number of the current line

    """
    mode: models.Mode = models.Mode.PREAMBLE
    previous_line: models.Line = models.Line.EMPTY
    previous_marker: typing.Optional[models.Entity] = None
    skip_next_empty_line: bool = False
    line_number: int = 0


class Splitter:
    """Split a plain-text dump into per-object files

    :param output: Where the files are written
    :type output: pgdumpsplit.output.Output
    :param str preamble_name: The file name for the preamble statements

    """
    def __init__(self, output: output.Output,
                 preamble_name: str = constants.DEFAULT_PREAMBLE_NAME):
        self.output = output
        self.preamble_name = preamble_name
        self.state = State()
        self.summary = models.Summary()
        self._header = header.HeaderReader()
        self._written: typing.Set[str] = set()
        self._handlers = {
            Destination.FUNCTION: self._open_function,
            Destination.SCHEMA_OBJECT: self._open_schema_object,
            Destination.SCHEMA: self._open_schema,
            Destination.NAMED: self._open_named,
            Destination.OWNED: self._open_owned,
            Destination.DISCARD: self._discard
        }

    def __repr__(self) -> str:
        return '<Splitter mode={} line_number={} output={!r}>'.format(
            self.state.mode.value, self.state.line_number, self.output)

    def process(self, lines: typing.Iterable[str]) -> models.Summary:
        """Split the lines, returning a summary of the run.

        The output is closed when the lines are exhausted or an error is
        raised. Files written before an error are left in place.

        :param lines: The dump, one line at a time without line endings
        :raises: :py:exc:`~pgdumpsplit.exceptions.PgDumpSplitError`
        :raises: :py:exc:`OSError`
        :rtype: pgdumpsplit.models.Summary

        """
        self._redirect(pathlib.PurePosixPath(self.preamble_name))
        try:
            for line in lines:
                self.feed(line)
        finally:
            self.output.close()
        self.summary.header = self._header.header
        LOGGER.info('Processed %i lines and %i markers, wrote %i files',
                    self.summary.lines, self.summary.markers,
                    len(self.summary.files))
        return self.summary

    def feed(self, line: str) -> None:
        """Process a single line of input

        :raises: :py:exc:`~pgdumpsplit.exceptions.PgDumpSplitError`
        :raises: :py:exc:`OSError`

        """
        self.state.line_number += 1
        self.summary.lines += 1
        current = parser.classify(line)
        if current == models.Line.PREAMBLE_COMMENT:
            self._header.observe(line)

        if self.state.mode == models.Mode.PREAMBLE:
            if (self.state.previous_line == models.Line.CONTENT
                    and current == models.Line.EMPTY):
                LOGGER.debug('Preamble ends on line %i',
                             self.state.line_number)
                self.state.mode = models.Mode.BODY
            if current == models.Line.CONTENT:
                self.output.write(line)
        elif current == models.Line.MARKER_COMMENT:
            self._on_marker(line)
        elif current != models.Line.EMPTY_COMMENT:
            if (current == models.Line.EMPTY
                    and self.state.skip_next_empty_line):
                self.state.skip_next_empty_line = False
            else:
                self.output.write(line)

        self.state.previous_line = current

    def _on_marker(self, line: str) -> None:
        entity = parser.parse_marker(line, self.state.line_number)
        self.summary.markers += 1
        LOGGER.debug('Line %i: %s %r (schema=%r, owner=%r)',
                     self.state.line_number, entity.entity_type.value,
                     entity.name, entity.schema, entity.owner)
        route = route_for(entity.entity_type)
        if route.requires_schema:
            if entity.schema is None:
                raise exceptions.SchemaMissingError(entity.name)
            self.output.ensure_directory(self._schema_dir(entity.schema))
            self._handlers[route.destination](entity, route)
            self.state.previous_marker = entity
        else:
            self._handlers[route.destination](entity, route)
        self.state.skip_next_empty_line = True
        self.output.flush()

    def _discard(self, entity: models.Entity, _route: Route) -> None:
        LOGGER.debug('Discarding the body of %s %r',
                     entity.entity_type.value, entity.name)
        self.summary.discarded += 1
        self.output.suppress()

    def _open_function(self, entity: models.Entity, route: Route) -> None:
        folder = self._schema_dir(entity.schema) / route.folder
        self.output.ensure_directory(folder)
        previous = self.state.previous_marker
        if (previous is not None
                and previous.entity_type == models.EntityType.FUNCTION
                and not self.output.suppressed
                and parser.is_overload(entity, previous)):
            LOGGER.debug('Grouping %r with the overload %r',
                         entity.name, previous.name)
            self.output.write('')
            return
        self._redirect(folder / self._file_name(
            entity.schema, parser.extract_function_name(entity)))

    def _open_named(self, entity: models.Entity, route: Route) -> None:
        folder = pathlib.PurePosixPath(route.folder)
        self._redirect(folder / self._file_name(entity.name))

    def _open_owned(self, entity: models.Entity, route: Route) -> None:
        folder = pathlib.PurePosixPath(route.folder)
        self._redirect(folder / self._file_name(entity.owner))

    def _open_schema(self, entity: models.Entity, _route: Route) -> None:
        folder = self._schema_dir(entity.name)
        self.output.ensure_directory(folder)
        self._redirect(folder / self._file_name(entity.name))

    def _open_schema_object(self, entity: models.Entity, route: Route) -> None:
        self._redirect(
            self._schema_dir(entity.schema) / route.folder /
            self._file_name(entity.schema, entity.name))

    def _redirect(self, path: pathlib.PurePosixPath) -> None:
        self.output.redirect(path)
        if str(path) not in self._written:
            self._written.add(str(path))
            self.summary.files.append(str(path))

    @staticmethod
    def _file_name(*parts: str) -> str:
        return '.'.join(parts) + constants.SQL_SUFFIX

    @staticmethod
    def _schema_dir(schema: str) -> pathlib.PurePosixPath:
        return pathlib.PurePosixPath(constants.SCHEMA_FOLDER) / schema
