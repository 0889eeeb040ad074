from __future__ import annotations


class PuzzleError(Exception):
    """Base for input problems reported at the CLI boundary as `Error: <message>`."""


class FileNotAccessible(PuzzleError):
    pass


class FormatError(PuzzleError):
    pass


class NotFound(PuzzleError):
    pass
