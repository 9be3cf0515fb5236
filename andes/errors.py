class AndesError(Exception):
    pass


class TransportError(AndesError):
    """The chat request never produced a response body."""

    def __init__(self, url, cause):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class ReplyParseError(AndesError):
    """The server answered with something that is not a chat reply."""
