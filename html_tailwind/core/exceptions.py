from __future__ import annotations

"""Exception classes for document conversion.

Two families live here. :class:`DocumentLoadError` subclasses are fatal: they
abort the conversion of one document and are surfaced once to the caller.
:class:`ConversionWarning` subclasses are observability signals only: they are
logged and collected but never raised past the style resolver or the
resolution pass.
"""

from typing import Optional


class HtmlTailwindError(Exception):
    """Base exception for all html_tailwind errors and signals."""

    def __init__(self, message: str, source: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause

    def __str__(self) -> str:
        if self.source:
            return f"[Document: {self.source}] {super().__str__()}"
        return super().__str__()


# ---------------------------------------------------------------------------
# Fatal errors
# ---------------------------------------------------------------------------


class DocumentLoadError(HtmlTailwindError):
    """Raised when a document cannot be turned into a node tree.

    The host decides whether to retry, skip or keep the previously loaded
    tree for that document.
    """
    pass


class DocumentIOError(DocumentLoadError):
    """Raised when the document bytes cannot be read."""
    pass


class EncodingError(DocumentLoadError):
    """Raised when the document bytes are not valid UTF-8."""
    pass


class MarkupSyntaxError(DocumentLoadError):
    """Raised when the document is not well-formed XML."""

    def __init__(self, message: str, source: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, source, cause)
        self.line = line
        self.column = column


class UnsupportedTagError(DocumentLoadError):
    """Raised when an element outside the recognized tag set appears where a
    node is expected, or a non-element reaches the converter.
    """

    def __init__(self, tag: str, source: Optional[str] = None) -> None:
        self.tag = tag
        super().__init__(f"Unsupported tag: {tag}", source)


class MissingRootError(DocumentLoadError):
    """Raised when a document holds no content element to use as root."""
    pass


# ---------------------------------------------------------------------------
# Non-fatal signals
# ---------------------------------------------------------------------------


class ConversionWarning(HtmlTailwindError):
    """Base class for non-fatal conversion signals.

    Instances are created, logged and collected; they are never raised.
    """
    pass


class UnsupportedClassToken(ConversionWarning):
    """A class token matched no grammar rule and was dropped."""

    def __init__(self, token: str, source: Optional[str] = None) -> None:
        self.token = token
        super().__init__(f"Unsupported style class: {token}", source)


class MissingResourceSource(ConversionWarning):
    """An ``img`` or ``font`` element lacks its path attribute."""

    def __init__(self, tag: str, attribute: str = "src",
                 source: Optional[str] = None) -> None:
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"<{tag}> element has no '{attribute}' attribute", source)
