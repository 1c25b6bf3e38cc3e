# SPDX-License-Identifier: MIT


class WorklogError(Exception):
    """Base class for errors surfaced to the user."""

    pass


class RecordValidationError(WorklogError):
    """Raised when a draft cannot be accepted as a record."""

    pass


class MissingClassificationError(RecordValidationError):
    def __init__(self) -> None:
        super().__init__("Fill in either an activity or an interaction.")


class MissingCounterpartiesError(RecordValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Select who the interaction was with (up to 3) when an interaction is set."
        )


class ImportDataError(WorklogError):
    """Raised when imported text is rejected. Prior state is left untouched."""

    pass


class ParseError(ImportDataError):
    pass


class StructureError(ImportDataError):
    pass


class FieldError(ImportDataError):
    pass


class RecordNotFoundError(WorklogError, LookupError):
    pass


class AmbiguousRecordIdError(WorklogError, LookupError):
    pass
