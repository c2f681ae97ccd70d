"""
pgdumpsplit exposes a split method that writes each object in a plain-text
:command:`pg_dump` file to its own file, using a
:py:class:`~pgdumpsplit.splitter.Splitter`.

"""
__version__ = '1.0.0'
version = __version__


def split(lines, base_dir, preamble_name: str = 'preamble.sql'):
    """Split a plain-text pg_dump file into per-object files

    :param lines: The dump, one line at a time without line endings
    :type lines: typing.Iterable[str]
    :param os.PathLike base_dir: The existing directory to write the files in
    :param preamble_name: The file name for the preamble statements
        (Default: ``preamble.sql``)
    :raises: :py:exc:`~pgdumpsplit.exceptions.PgDumpSplitError`
    :raises: :py:exc:`OSError`
    :rtype: pgdumpsplit.models.Summary

    """
    from pgdumpsplit import output, splitter

    return splitter.Splitter(
        output.FileOutput(base_dir), preamble_name).process(lines)
