"""
statsdparser - (Dog)StatsD line parser

See LICENSE for details
"""
from statsdparser.common import MetricType, ServiceCheckStatus
from statsdparser.errors import (
    Error, InvalidSampleRate, InvalidValue, MalformedMetric, MalformedTag, ParseError, UnknownMetricType
)
from statsdparser.models import ParseResult, ServiceCheck
from statsdparser.parser import parse, parse_message, parse_service_check

__all__ = [
    "Error",
    "InvalidSampleRate",
    "InvalidValue",
    "MalformedMetric",
    "MalformedTag",
    "MetricType",
    "ParseError",
    "ParseResult",
    "ServiceCheck",
    "ServiceCheckStatus",
    "UnknownMetricType",
    "parse",
    "parse_message",
    "parse_service_check",
]
