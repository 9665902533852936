"""Field extractor — literal delimiter split, 1-based index."""

from __future__ import annotations

INDEX_OUT_OF_RANGE = "IndexOutOfRange"
EMPTY_FIELD = "EmptyField"


class FieldError(Exception):
    """Raised when the configured field cannot be extracted from a line."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def extract_field(text: str, delimiter: str, index: int) -> str:
    """Return field *index* (1-based) of *text* split on *delimiter*.

    No quoting or escaping is honoured. An empty *delimiter* makes the
    whole line field 1.
    """
    if not delimiter:
        fields = [text]
    else:
        # Only the first *index* fields are ever needed.
        fields = text.split(delimiter, index)

    if index > len(fields):
        raise FieldError(
            INDEX_OUT_OF_RANGE,
            f"no field could be found at index {index} ({len(fields)} available)",
        )
    field = fields[index - 1]
    if not field:
        raise FieldError(EMPTY_FIELD, f"empty field at index {index}")
    return field
