"""Error types for html_styles."""


class HTMLStylesError(Exception):
    """Base error for all html_styles errors."""


class UnknownTagError(HTMLStylesError, KeyError):
    """Raised when a tag has no entry in the default stylesheet."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No default style for tag: {tag!r}")

    def __str__(self) -> str:
        return self.args[0]
