"""Exception hierarchy for patternmotion."""


class PatternMotionError(Exception):
    """Base exception for all patternmotion errors."""

    pass


class TemplateError(PatternMotionError):
    """Errors related to motion pattern templates."""

    pass


class InvalidTemplateError(TemplateError):
    """Template has no usable direction.

    Raised when the template ends at its starting point, or when it contains
    a non-finite coordinate.
    """

    def __init__(self, point: tuple[float, float], reason: str | None = None) -> None:
        self.point = point
        self.reason = reason or "pattern must not end at the starting point"
        super().__init__(f"{self.reason} ({point[0]:g}, {point[1]:g})")


class MissingTemplateDataError(TemplateError):
    """Template path data required by a configuration is absent."""

    def __init__(self, field: str = "path_data") -> None:
        self.field = field
        super().__init__(f"{field} must be supplied for a pattern motion")


class PathDataError(PatternMotionError):
    """Path data text could not be parsed."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Invalid path data '{path_data}': {reason}")
