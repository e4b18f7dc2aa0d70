class SvgLevelError(Exception):
    """Base class for everything that aborts a level export."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.element = None

    def located(self, tag, element_id=None):
        # Innermost element wins, outer groups don't overwrite it
        if self.element is None:
            self.element = f"<{tag} id={element_id!r}>" if element_id else f"<{tag}>"
        return self

    def __str__(self):
        if self.element:
            return f"{self.message} (in {self.element})"
        return self.message


class UnsupportedTransformError(SvgLevelError):
    pass


class MalformedTransformError(SvgLevelError):
    pass


class UnsupportedCommandError(SvgLevelError):
    pass


class MalformedPathDataError(SvgLevelError):
    pass


class ConfigError(SvgLevelError):
    pass
