"""Core conversion and editing logic for routines-md."""

from routines_md.core.converter import DocumentConverter, ConversionError
from routines_md.core.editing import (
    EditContext,
    Markup,
    Selection,
    apply_markup,
    insert_markup,
    insert_table,
)

__all__ = [
    "DocumentConverter",
    "ConversionError",
    "EditContext",
    "Markup",
    "Selection",
    "apply_markup",
    "insert_markup",
    "insert_table",
]
