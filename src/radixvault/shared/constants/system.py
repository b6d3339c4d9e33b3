"""Base time units shared by the constant modules."""

BASE_SECOND = 1
BASE_MINUTE = 60 * BASE_SECOND
BASE_HOUR = 60 * BASE_MINUTE
BASE_DAY = 24 * BASE_HOUR


class Logging:
    """Logging configuration constants."""

    DEFAULT_LEVEL = "INFO"
    DEFAULT_LOGGER_NAME = "radixvault"
    LOG_TIME_FORMAT = "[%H:%M:%S]"


__all__ = ["BASE_DAY", "BASE_HOUR", "BASE_MINUTE", "BASE_SECOND", "Logging"]
