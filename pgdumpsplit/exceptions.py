"""
pgdumpsplit specific exceptions

"""


class PgDumpSplitError(Exception):
    """Common Base Exception"""


class GarbledMarkerError(PgDumpSplitError):
    """Raised when a line looks like an object marker comment but can not be
    turned into an entity, most often because the ``Type`` is not one that
    is known.

    """

    def __init__(self, line_number: int):
        super().__init__()
        self.line_number = line_number

    def __repr__(self) -> str:
        return f'<GarbledMarker line_number={self.line_number!r}>'

    def __str__(self) -> str:
        return f'garbled marker comment (line: {self.line_number})'


class SchemaMissingError(PgDumpSplitError):
    """Raised when an object that is filed by schema has a marker comment
    without one.

    """

    def __init__(self, name: str):
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f'<SchemaMissing name={self.name!r}>'

    def __str__(self) -> str:
        return f'schema unknown for object {self.name!r}'


class GarbledFunctionNameError(PgDumpSplitError):
    """Raised when the bare name can not be extracted from a function
    signature.

    """

    def __init__(self, signature: str):
        super().__init__()
        self.signature = signature

    def __repr__(self) -> str:
        return f'<GarbledFunctionName signature={self.signature!r}>'

    def __str__(self) -> str:
        return f'function signature garbled ({self.signature})'


class BaseDirExistsError(PgDumpSplitError):
    """Raised by the command line when the base directory is already there
    and recreating it was not requested.

    """

    def __init__(self, path):
        super().__init__()
        self.path = path

    def __repr__(self) -> str:  # pragma: nocover
        return f'<BaseDirExists path={str(self.path)!r}>'

    def __str__(self) -> str:
        return (
            f'Base directory {str(self.path)!r} already exists, specify '
            f'--recreate-base-dir to allow automatic deletion'
        )
