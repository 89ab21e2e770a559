"""
StatsD line formatting

Renders parsed metrics back into wire text, either in the DogStatsD format
or with telegraf's 'key=value' tag extension:

  https://docs.datadoghq.com/developers/dogstatsd/datagram_shell/
  https://github.com/influxdata/telegraf/tree/master/plugins/inputs/statsd

"""
from statsdparser.common import MessageFormat
from statsdparser.errors import InvalidConfigurationError

# floats at or above this lose integer precision, keep them in repr form
_MAX_EXACT_INTEGER = 2**53


def format_value(value):
    if value.is_integer() and abs(value) < _MAX_EXACT_INTEGER:
        return str(int(value))
    return repr(value)


def format_metric(result, message_format="datadog"):
    try:
        message_format = MessageFormat(message_format)
    except ValueError:
        raise InvalidConfigurationError("Unsupported message format {!r}".format(message_format))

    # telegraf format: "user.logins,service=payroll,region=us-west:1|c"
    # datadog format: metric.name:value|type|@sample_rate|#tag1:value,tag2:value
    parts = [result.name, ":", format_value(result.value), "|", str(result.metric_type)]
    if result.sample_rate != 1.0:
        parts.append("|@{}".format(format_value(result.sample_rate)))
    if message_format == MessageFormat.datadog:
        for index, (tag, val) in enumerate(sorted(result.tags.items())):
            separator = "|#" if index == 0 else ","
            parts.append("{}{}:{}".format(separator, tag, val))
    else:
        for tag, val in sorted(result.tags.items(), reverse=True):
            parts.insert(1, ",{}={}".format(tag, val))

    return "".join(parts)


def format_service_check(check):
    # _sc|name|status|d:timestamp|h:hostname|#tag1:value1,tag2:value2|m:message
    parts = ["_sc|", check.name, "|", str(check.status)]
    if check.timestamp is not None:
        parts.append("|d:{}".format(format_value(check.timestamp)))
    if check.hostname is not None:
        parts.append("|h:{}".format(check.hostname))
    if check.tags:
        parts.append("|#")
        parts.append(",".join("{}:{}".format(tag, val) for tag, val in sorted(check.tags.items())))
    if check.message is not None:
        parts.append("|m:{}".format(check.message))
    return "".join(parts)
