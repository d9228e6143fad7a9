"""Exception types raised by the outline and analysis pipeline."""


class PdfOutlineError(Exception):
    """Base class for all errors raised by this package."""


class DocumentLoadError(PdfOutlineError):
    """The PDF could not be opened or read at all."""


class InputValidationError(PdfOutlineError):
    """User-supplied input is missing or empty.

    Callers are expected to show the message to the user as an advisory.
    """
