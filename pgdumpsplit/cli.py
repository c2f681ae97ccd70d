"""
Command line interface for splitting a plain-text pg_dump file read from
STDIN, or from a file, into a directory of per-object files.

"""
import argparse
import io
import logging
import os
import shutil
import sys
import typing
from os import path

import dotenv

from pgdumpsplit import constants, exceptions, output, splitter, version

LOGGER = logging.getLogger(__name__)
LOGGING_FORMAT = '[%(asctime)-15s] %(levelname)-8s %(message)s'


def add_logging_options_to_parser(parser):
    """Add logging options to the parser.

    :param argparse.ArgumentParser parser: The parser to add the args to

    """
    group = parser.add_argument_group(title='Logging Options')
    group.add_argument(
        '-L',
        '--log-file',
        action='store',
        help='Log to the specified filename. If not specified, '
        'log output is sent to STDERR',
    )
    group.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Increase output verbosity',
    )
    group.add_argument(
        '--debug', action='store_true', help='Extra verbose debug logging'
    )


def configure_logging(args):
    """Configure Python logging.

    :param argparse.namespace args: The parsed cli arguments

    """
    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    elif args.debug:
        level = logging.DEBUG
    filename = args.log_file if args.log_file else None
    if filename:
        filename = path.abspath(filename)
        if not path.exists(path.dirname(filename)):
            filename = None
    logging.basicConfig(level=level, filename=filename, format=LOGGING_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pgdumpsplit',
        description='Split a plain-text pg_dump file into one file per '
                    'database object',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        'dump',
        metavar='DUMP',
        nargs='?',
        default='-',
        help='The plain-text dump to split, "-" reads from STDIN',
    )
    parser.add_argument(
        '-b',
        '--base-dir',
        action='store',
        default=os.environ.get(constants.ENV_BASE_DIR),
        help='The directory to write the split files to '
             f'(env: {constants.ENV_BASE_DIR})',
    )
    parser.add_argument(
        '-r',
        '--recreate-base-dir',
        action='store_true',
        help='Automatically re-create the specified base directory',
    )
    parser.add_argument(
        '--preamble-name',
        action='store',
        default=os.environ.get(
            constants.ENV_PREAMBLE_NAME, constants.DEFAULT_PREAMBLE_NAME),
        help='The file name for the statements that precede the first object '
             f'(env: {constants.ENV_PREAMBLE_NAME})',
    )
    parser.add_argument(
        '-n',
        '--dry-run',
        action='store_true',
        help='List the files that would be written without writing them',
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {version}')
    add_logging_options_to_parser(parser)
    return parser


def read_lines(handle: typing.TextIO) -> typing.Iterator[str]:
    """Iterate over the lines in the handle without their line endings"""
    for line in handle:
        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
        yield line


def prepare_base_dir(base_dir: str, recreate: bool) -> None:
    """Create the base directory, removing it first if it exists and
    ``recreate`` is set.

    :raises: :py:exc:`~pgdumpsplit.exceptions.BaseDirExistsError`
    :raises: :py:exc:`OSError`

    """
    if path.exists(base_dir):
        if not recreate:
            raise exceptions.BaseDirExistsError(base_dir)
        LOGGER.info('Removing existing base directory %s', base_dir)
        shutil.rmtree(base_dir, ignore_errors=True)
    os.makedirs(base_dir, exist_ok=True)


def run(args) -> int:
    """Split the dump as configured by the parsed cli arguments, returning
    the process exit code.

    :param argparse.namespace args: The parsed cli arguments
    :rtype: int

    """
    if args.dry_run:
        out = output.MemoryOutput()
    else:
        prepare_base_dir(args.base_dir, args.recreate_base_dir)
        out = output.FileOutput(args.base_dir)

    if args.dump == '-':
        handle = io.TextIOWrapper(
            sys.stdin.buffer, encoding='utf-8', newline='\n')
    else:
        handle = open(args.dump, 'r', encoding='utf-8', newline='\n')
    with handle:
        summary = splitter.Splitter(out, args.preamble_name).process(
            read_lines(handle))

    if args.dry_run:
        for name in summary.files:
            print('{:>10}  {}'.format(len(out.contents(name)), name))
    LOGGER.info('%i of %i objects discarded',
                summary.discarded, summary.markers)
    return 0


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    dotenv.load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.base_dir and not args.dry_run:
        parser.error(
            f'the --base-dir argument or {constants.ENV_BASE_DIR} is required')
    configure_logging(args)
    try:
        return run(args)
    except (exceptions.PgDumpSplitError, OSError,
            UnicodeDecodeError) as error:
        LOGGER.error('Error splitting %s: %s', args.dump, error)
        return 1


if __name__ == '__main__':
    sys.exit(main())
