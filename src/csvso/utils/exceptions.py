class CsvSOError(Exception):
    """
    Base exception for all csvso errors
    """
    pass


class MissingInputError(CsvSOError):
    """
    Raised when no CSV file is assigned or it cannot be found
    """
    pass


class SchemaError(CsvSOError):
    """
    Raised when the comment/header/type lines are missing or misaligned
    """
    pass


class TypeNotFoundError(CsvSOError):
    """
    Raised when a generated container type is not in the registry
    """
    pass


class AssetNotFoundError(CsvSOError):
    """
    Raised when a container type has no persisted instance yet
    """
    pass


class ArtifactFormatError(CsvSOError):
    """
    Raised when a persisted asset or the type registry cannot be parsed
    """
    pass


class OutputWriteError(CsvSOError):
    """
    Raised when a generated, imported or exported file cannot be written
    """
    pass
