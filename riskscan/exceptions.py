class ScanError(Exception):
    pass


class InputError(ScanError):
    """Missing or blank token address / chain id."""


class NotFoundError(ScanError):
    """Security provider has no record for the address."""


class UpstreamError(ScanError):
    """A provider call raised."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
