"""Failures reading Cocina documents and object histories from disk."""


class CocinaFileError(Exception):
    """A file backing the document or version store could not be used."""


class CocinaFileNotFoundError(CocinaFileError):
    pass


class CocinaFileParseError(CocinaFileError):
    """The file is not UTF-8 encoded JSON."""


class CocinaFileShapeError(CocinaFileError):
    """Input parsed but does not have the shape of a Cocina document."""
