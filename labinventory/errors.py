class LabClientError(Exception):
    """A failed call to the lab API, carrying the message shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoginFailedError(LabClientError):
    def __init__(self, message: str = "Login failed") -> None:
        super().__init__(message)


class MissingTokenError(LabClientError):
    def __init__(self) -> None:
        super().__init__("No token received")


class InventoryFetchError(LabClientError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Inventory fetch failed: {status_code}")
        self.status_code = status_code
