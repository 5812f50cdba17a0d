"""A submodule for custom Firefly Garden exceptions."""


class BackendNotReachableError(RuntimeError):
    """The counter service could not be used.

    This is raised by `.CounterClient` if a request fails for any reason:
    the connection could not be made, the server responded with an error
    status, or the response body could not be understood.

    These cases are deliberately not distinguished further. The garden
    client shows the same message for all of them, and does not retry.
    """


class ConfigurationError(RuntimeError):
    """The server could not be configured from the command line.

    This is raised if configuration is supplied in a way that cannot be
    used, for example if both a file and a JSON string are given.
    """
