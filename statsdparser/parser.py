"""
statsdparser - (Dog)StatsD line parser

Parses one line of the StatsD text protocol with DogStatsD's sample rate
and tag extensions:

  gorets:1|c|@0.9|#hostname:frontend1,dc:ams01

and DogStatsD service checks:

  _sc|Redis connection|2|d:10101|h:frontend1|#redis_instance:10.0.0.16:6379|m:timed out

See LICENSE for details
"""
import math
import re

from statsdparser.common import MetricType, ServiceCheckStatus
from statsdparser.errors import (InvalidSampleRate, InvalidValue, MalformedMetric, MalformedTag, UnknownMetricType)
from statsdparser.models import ParseResult, ServiceCheck

SERVICE_CHECK_PREFIX = "_sc|"

FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_float(text):
    """Parse a finite decimal floating point literal, returns None if `text`
    isn't one or overflows"""
    if not FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_tags(text):
    """Parse a comma separated list of key:value pairs, the last value
    of a repeated key wins"""
    tags = {}
    for pair in text.split(","):
        key, separator, value = pair.partition(":")
        if not separator:
            raise MalformedTag("Tag {!r} has no key/value separator".format(pair))
        if not key:
            raise MalformedTag("Tag {!r} has an empty key".format(pair))
        tags[key] = value
    return tags


def parse_sample_rate(text):
    sample_rate = parse_float(text)
    # the rate is a probability, zero or anything above one is meaningless
    if sample_rate is None or not 0.0 < sample_rate <= 1.0:
        raise InvalidSampleRate("Sample rate {!r} is not a number in (0.0, 1.0]".format(text))
    return sample_rate


def parse(line):
    """Parse a single StatsD metric line into a ParseResult.

    Raises a subclass of ParseError describing the first violated rule.
    The line is used as-is: trailing newlines must be stripped by the
    caller.
    """
    if not line:
        raise MalformedMetric("Empty input")

    name, separator, rest = line.partition(":")
    if not separator:
        raise MalformedMetric("No name/value separator ':' in {!r}".format(line))
    if not name:
        raise MalformedMetric("No name in {!r}".format(line))
    if "|" in name:
        raise MalformedMetric("Name {!r} contains a '|'".format(name))

    value_text, separator, rest = rest.partition("|")
    if not separator:
        raise MalformedMetric("No value/type separator '|' in {!r}".format(line))

    value = parse_float(value_text)
    if value is None:
        raise InvalidValue("Value {!r} is not a number".format(value_text))

    type_token, *segments = rest.split("|")
    try:
        metric_type = MetricType(type_token)
    except ValueError:
        raise UnknownMetricType("Unknown metric type {!r}".format(type_token))

    sample_rate = 1.0
    tags = {}
    for segment in segments:
        if segment.startswith("@"):
            sample_rate = parse_sample_rate(segment[1:])
        elif segment.startswith("#"):
            tags = parse_tags(segment[1:])
        # anything else is a protocol extension we don't model

    return ParseResult(name=name, value=value, metric_type=metric_type, sample_rate=sample_rate, tags=tags)


SERVICE_CHECK_STATUSES = {
    "0": ServiceCheckStatus.ok,
    "1": ServiceCheckStatus.warning,
    "2": ServiceCheckStatus.critical,
    "3": ServiceCheckStatus.unknown,
}


def parse_service_check_status(token):
    return SERVICE_CHECK_STATUSES.get(token, ServiceCheckStatus.unknown)


def parse_service_check(line):
    """Parse a DogStatsD service check line into a ServiceCheck"""
    if not line.startswith(SERVICE_CHECK_PREFIX):
        raise MalformedMetric("Service check {!r} does not start with {!r}".format(line, SERVICE_CHECK_PREFIX))

    name, *segments = line[len(SERVICE_CHECK_PREFIX):].split("|")
    if not name:
        raise MalformedMetric("No name in {!r}".format(line))

    status = ServiceCheckStatus.unknown
    if segments:
        status = parse_service_check_status(segments.pop(0))

    fields = {}
    for segment in segments:
        if segment.startswith("d:"):
            timestamp = parse_float(segment[2:])
            if timestamp is None:
                raise InvalidValue("Timestamp {!r} is not a number".format(segment[2:]))
            fields["timestamp"] = timestamp
        elif segment.startswith("h:"):
            fields["hostname"] = segment[2:]
        elif segment.startswith("#"):
            fields["tags"] = parse_tags(segment[1:])
        elif segment.startswith("m:"):
            fields["message"] = segment[2:]

    return ServiceCheck(name=name, status=status, **fields)


def parse_message(line):
    """Parse either a metric or a service check line"""
    if line.startswith(SERVICE_CHECK_PREFIX):
        return parse_service_check(line)
    return parse(line)
