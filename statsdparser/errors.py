"""
statsdparser - exception classes

See LICENSE for details
"""


class Error(Exception):
    """Generic statsdparser exception"""


class InvalidConfigurationError(Error):
    """Invalid configuration"""


class ParseError(Error):
    """Line could not be parsed"""


class MalformedMetric(ParseError):
    """Mandatory separator missing or empty name"""


class InvalidValue(ParseError):
    """Value is not a number"""


class UnknownMetricType(ParseError):
    """Metric type token is not recognized"""


class InvalidSampleRate(ParseError):
    """Sample rate is not a number in (0.0, 1.0]"""


class MalformedTag(ParseError):
    """Tag pair lacks a key/value separator or has an empty key"""
