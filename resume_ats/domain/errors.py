"""Domain-level exceptions."""

from __future__ import annotations


class InvalidDocumentError(ValueError):
    """Raised when a resume document is structurally unusable.

    Missing fields are never an error -- they default to empty. This is only
    raised for contract violations such as ``None`` instead of a document, or
    a section holding the wrong container type.
    """


class EditError(ValueError):
    """Raised when an edit addresses an unknown section or an invalid path."""
