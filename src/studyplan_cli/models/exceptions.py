"""Exceptions raised by the import/export layer."""


class SnapshotImportError(Exception):
    """Base class for backup import failures."""


class ParseFailureError(SnapshotImportError):
    """Raised when the input is not valid JSON at all."""


class InvalidFormatError(SnapshotImportError):
    """Raised when the input parses but is not a valid backup document.

    A backup document must be an object with both ``tasks`` and ``notes``
    keys whose entries validate as tasks and notes.
    """
