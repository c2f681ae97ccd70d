"""
Output Stream Manager
=====================
The splitter writes to exactly one destination at a time. Redirecting
closes the current writer, which flushes anything it buffered, and installs
a writer for the new destination. Suppressing installs a
:py:class:`Discard` writer that drops everything written to it.

:py:class:`FileOutput` writes real files below a base directory and
:py:class:`MemoryOutput` keeps everything in memory, which is used for dry
runs and in tests.

"""
import io
import logging
import pathlib
import typing

LOGGER = logging.getLogger(__name__)


class Discard:
    """Writer that drops everything written to it"""

    def write(self, value: str) -> int:
        return len(value)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class Output:
    """Common base for the output managers. Paths passed to the methods are
    relative to the output's base.

    """
    def __init__(self):
        self._opened: typing.Set[pathlib.PurePath] = set()
        self._path: typing.Optional[pathlib.PurePath] = None
        self._writer: typing.Any = Discard()

    def __repr__(self) -> str:
        return '<{} path={!r}>'.format(
            self.__class__.__name__,
            str(self._path) if self._path else None)

    @property
    def path(self) -> typing.Optional[pathlib.PurePath]:
        """The relative path currently being written to, :py:const:`None`
        while output is suppressed.

        """
        return self._path

    @property
    def suppressed(self) -> bool:
        return isinstance(self._writer, Discard)

    def close(self) -> None:
        """Close the current writer, further writes are discarded"""
        self._replace(Discard(), None)

    def ensure_directory(self, path: pathlib.PurePath) -> None:
        """Create the directory and any missing parents

        :raises: :py:exc:`OSError`

        """
        raise NotImplementedError

    def flush(self) -> None:
        self._writer.flush()

    def redirect(self, path: pathlib.PurePath) -> None:
        """Send all further writes to the file at ``path``, creating missing
        parent directories. The file is truncated the first time it is opened
        by this output and appended to when it is opened again.

        :raises: :py:exc:`OSError`

        """
        append = path in self._opened
        LOGGER.debug('Redirecting output to %s (append=%s)', path, append)
        self._replace(self._open(path, append), path)
        self._opened.add(path)

    def suppress(self) -> None:
        """Discard all further writes until the next redirect"""
        LOGGER.debug('Suppressing output')
        self._replace(Discard(), None)

    def write(self, line: str) -> None:
        """Write the line, appending a newline"""
        self._writer.write(line + '\n')

    def _open(self, path: pathlib.PurePath, append: bool):
        raise NotImplementedError

    def _replace(self, writer, path: typing.Optional[pathlib.PurePath]):
        previous, self._writer, self._path = self._writer, writer, path
        previous.close()


class FileOutput(Output):
    """Writes UTF-8 files below ``base_dir``

    :param os.PathLike base_dir: The directory the relative paths are
        resolved against

    """
    def __init__(self, base_dir):
        super().__init__()
        self.base_dir = pathlib.Path(base_dir)

    def ensure_directory(self, path: pathlib.PurePath) -> None:
        (self.base_dir / path).mkdir(parents=True, exist_ok=True)

    def _open(self, path: pathlib.PurePath, append: bool):
        target = self.base_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        return open(target, 'a' if append else 'w', encoding='utf-8',
                    newline='\n')


class _Buffer(io.StringIO):
    """A :py:class:`io.StringIO` that keeps its value when closed"""

    def close(self) -> None:
        pass


class MemoryOutput(Output):
    """Keeps the written files in memory

    :var files: The written content, keyed by relative path
    :var directories: The relative paths of every directory created,
        explicitly or as the parent of a file
    :var redirects: Every destination installed, in order, with
        :py:const:`None` for each suppression

    """
    def __init__(self):
        super().__init__()
        self.files: typing.Dict[str, _Buffer] = {}
        self.directories: typing.Set[str] = set()
        self.redirects: typing.List[typing.Optional[str]] = []

    def contents(self, path) -> str:
        """Return what was written to the file at the relative ``path``

        :raises: :py:exc:`KeyError` if nothing was written to the path

        """
        return self.files[str(pathlib.PurePosixPath(path))].getvalue()

    def ensure_directory(self, path: pathlib.PurePath) -> None:
        path = pathlib.PurePosixPath(path)
        self.directories.update(
            str(parent) for parent in [path, *path.parents]
            if str(parent) != '.')

    def suppress(self) -> None:
        super().suppress()
        self.redirects.append(None)

    def _open(self, path: pathlib.PurePath, append: bool):
        path = pathlib.PurePosixPath(path)
        self.ensure_directory(path.parent)
        self.redirects.append(str(path))
        if not append:
            self.files[str(path)] = _Buffer()
        return self.files[str(path)]
