class SambatError(ValueError):
    """Base error for calendar conversion failures."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OutOfRangeYearError(SambatError):
    """The BS year (or the AD date's BS equivalent) is not in the calendar table."""

    code = "out_of_range_year"


class InvalidComponentError(SambatError):
    """Month outside 1–12, or a day that does not exist in its month."""

    code = "invalid_component"


class MalformedInputError(SambatError):
    """Input text or payload does not parse as a date."""

    code = "malformed_input"
