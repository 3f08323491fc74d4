class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class JourneyLogError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class JourneyLogReadError(JourneyLogError):
    def __init__(self, message: str = 'Unable to read journey log') -> None:
        super().__init__(message)


class JourneyLogWriteError(JourneyLogError):
    def __init__(self, message: str = 'Unable to write journey log') -> None:
        super().__init__(message)
