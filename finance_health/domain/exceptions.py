"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DataSourceError(DomainException):
    """Financial records could not be loaded from storage"""

    pass


class UnsupportedLocaleError(DomainException):
    """No message catalog exists for the requested locale"""

    def __init__(self, locale: str):
        super().__init__(f"Unsupported locale: {locale}")
        self.locale = locale
