"""
Dump Header
===========
pg_dump writes informational comments at the top of a plain-text dump, and
when run with ``--verbose``, at the bottom as well:

.. code-block:: sql

    -- Dumped from database version 12.2
    -- Dumped by pg_dump version 12.2

    -- Started on 2020-04-01 10:25:13 UTC

None of this changes what is written to the split files, it is collected
into a :py:class:`~pgdumpsplit.models.DumpHeader` for the run summary.

"""
import logging
import re
import typing

import arrow
from dateutil import tz

from pgdumpsplit import constants, models

LOGGER = logging.getLogger(__name__)

PATTERNS = {
    'server_version': re.compile(r'^--\s+Dumped from database version (.*)$'),
    'dump_version': re.compile(r'^--\s+Dumped by [\w_-]+ version (.*)$'),
    'started_at': re.compile(r'^--\s+Started on (.*)$'),
    'completed_at': re.compile(r'^--\s+Completed on (.*)$')
}

TIMESTAMPS = {'started_at', 'completed_at'}


def parse_timestamp(value: str) -> typing.Optional[arrow.Arrow]:
    """Parse a timestamp in the layout pg_dump uses for its ``Started on``
    and ``Completed on`` comments (``%Y-%m-%d %H:%M:%S %Z``).

    Zone abbreviations that :py:mod:`dateutil.tz` does not know are taken to
    be UTC.

    :param value: The timestamp text
    :rtype: arrow.Arrow or None

    """
    parts = value.strip().rsplit(' ', 1)
    zone = None
    if len(parts) == 2 and not parts[1][:1].isdigit():
        value, zone = parts
    try:
        timestamp = arrow.get(value.strip(), constants.ARROW_TIMESTAMP_FMT)
    except ValueError as error:
        LOGGER.warning('Could not parse dump timestamp %r: %s', value, error)
        return None
    tzinfo = tz.gettz(zone) if zone else None
    if zone and tzinfo is None:
        LOGGER.debug('Unknown time zone %r, using UTC', zone)
    return timestamp.replace(tzinfo=tzinfo or tz.UTC)


class HeaderReader:
    """Collects the dump header from the comment lines it is shown"""

    def __init__(self):
        self.header = models.DumpHeader()

    def observe(self, line: str) -> None:
        """Record the value if the line is one of the known header
        comments, anything else is ignored.

        """
        for field, pattern in PATTERNS.items():
            match = pattern.match(line)
            if not match:
                continue
            value = match.group(1).strip()
            if field in TIMESTAMPS:
                value = parse_timestamp(value)
            LOGGER.info('Dump %s: %s', field.replace('_', ' '), value)
            setattr(self.header, field, value)
            return
