"""
statsdparser - configuration validation

See LICENSE for details
"""
import json
import logging.handlers

from statsdparser.common import MessageFormat
from statsdparser.errors import InvalidConfigurationError

OUTPUT_FORMATS = ["json"] + [message_format.value for message_format in MessageFormat]
ON_ERROR_ACTIONS = ["log", "fail", "ignore"]
LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def set_and_check_config_defaults(config):
    config.setdefault("log_level", "INFO")
    config.setdefault("output_format", "json")
    config.setdefault("json_compact", True)
    config.setdefault("on_error", "log")
    config.setdefault("default_tags", {})
    config.setdefault("syslog", False)
    config.setdefault("syslog_address", "/dev/log")
    config.setdefault("syslog_facility", "local2")

    for key in ["json_compact", "syslog"]:
        if not isinstance(config[key], bool):
            raise InvalidConfigurationError("{} must be true or false, got {!r}".format(key, config[key]))
    if config["log_level"] not in LOG_LEVELS:
        raise InvalidConfigurationError(
            "Invalid log_level {!r}, must be one of {}".format(config["log_level"], ", ".join(LOG_LEVELS))
        )
    if config["output_format"] not in OUTPUT_FORMATS:
        raise InvalidConfigurationError(
            "Invalid output_format {!r}, must be one of {}".format(config["output_format"], ", ".join(OUTPUT_FORMATS))
        )
    if config["on_error"] not in ON_ERROR_ACTIONS:
        raise InvalidConfigurationError(
            "Invalid on_error {!r}, must be one of {}".format(config["on_error"], ", ".join(ON_ERROR_ACTIONS))
        )
    if not isinstance(config["default_tags"], dict):
        raise InvalidConfigurationError("default_tags must be an object, got {!r}".format(config["default_tags"]))
    for tag, value in config["default_tags"].items():
        if not tag:
            raise InvalidConfigurationError("default_tags can not contain an empty key")
        if not isinstance(value, str):
            raise InvalidConfigurationError("default_tags value for {!r} must be a string, got {!r}".format(tag, value))
    if config["syslog"] and config["syslog_facility"] not in logging.handlers.SysLogHandler.facility_names:
        raise InvalidConfigurationError("Invalid syslog_facility {!r}".format(config["syslog_facility"]))
    return config


def read_json_config_file(filename, *, add_defaults=True):
    try:
        with open(filename, "r") as fp:
            config = json.load(fp)
    except FileNotFoundError:
        raise InvalidConfigurationError("Configuration file {!r} does not exist".format(filename))
    except ValueError as ex:
        raise InvalidConfigurationError("Configuration file {!r} does not contain valid JSON: {}".format(filename, str(ex)))
    except OSError as ex:
        raise InvalidConfigurationError(
            "Configuration file {!r} can't be opened: {}".format(filename, ex.__class__.__name__)
        )

    if not isinstance(config, dict):
        raise InvalidConfigurationError("Configuration file {!r} must contain a JSON object".format(filename))

    if not add_defaults:
        return config

    return set_and_check_config_defaults(config)
