class JokeboxError(Exception):
    """Base class for recoverable joke viewer errors."""


class JokeFetchError(JokeboxError):
    """The joke provider could not be reached or answered with an error."""


class InvalidJokeError(JokeFetchError):
    """The provider answered, but not with a usable joke record."""


NO_JOKE_MESSAGE = "Get a joke first!"


class NoJokeLoadedError(JokeboxError):
    def __init__(self, message: str = NO_JOKE_MESSAGE):
        super().__init__(message)
