"""
statsdparser - common types and utility functions

See LICENSE for details
"""
import collections.abc
import enum
import json


class StrEnum(str, enum.Enum):
    def __str__(self):
        return str(self.value)


@enum.unique
class MetricType(StrEnum):
    counter = "c"
    gauge = "g"
    timer = "ms"
    histogram = "h"
    set = "s"
    meter = "m"


@enum.unique
class ServiceCheckStatus(enum.IntEnum):
    ok = 0
    warning = 1
    critical = 2
    unknown = 3

    def __str__(self):
        return str(self.value)


@enum.unique
class MessageFormat(StrEnum):
    datadog = "datadog"
    telegraf = "telegraf"


class TagMap(collections.abc.Mapping):
    """Read-only, hashable tag key to value mapping"""
    def __init__(self, tags=None):
        self._tags = dict(tags or {})

    def __getitem__(self, key):
        return self._tags[key]

    def __iter__(self):
        return iter(self._tags)

    def __len__(self):
        return len(self._tags)

    def __hash__(self):
        return hash(frozenset(self._tags.items()))

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._tags)


def default_json_serialization(obj):
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, TagMap):
        return dict(obj)
    return None


def json_encode(obj, compact=True, binary=False):
    res = json.dumps(
        obj,
        sort_keys=not compact,
        indent=None if compact else 4,
        separators=(",", ":") if compact else None,
        default=default_json_serialization
    )
    return res.encode("utf-8") if binary else res
