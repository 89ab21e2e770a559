"""
statsdparser - command line tool for parsing (Dog)StatsD lines

See LICENSE for details
"""
import argparse
import logging
import os
import sys

from statsdparser import config, logutil, version
from statsdparser.common import TagMap, json_encode
from statsdparser.config import ON_ERROR_ACTIONS, OUTPUT_FORMATS
from statsdparser.errors import InvalidConfigurationError, MalformedMetric, ParseError
from statsdparser.models import ServiceCheck
from statsdparser.parser import parse_message


def decode_line(line):
    if not isinstance(line, bytes):
        return line
    try:
        return line.decode("utf-8")
    except UnicodeDecodeError as ex:
        raise MalformedMetric("Line is not valid UTF-8: {}".format(ex)) from ex


class StatsdParserTool:
    def __init__(self):
        self.log = logging.getLogger(self.__class__.__name__)
        self.config = None

    def set_config(self, config_file, overrides=None):
        if config_file:
            config_obj = config.read_json_config_file(config_file, add_defaults=False)
        else:
            config_obj = {}
        config_obj.update({key: value for key, value in (overrides or {}).items() if value is not None})
        self.config = config.set_and_check_config_defaults(config_obj)
        return self.config

    def format_output(self, parsed):
        if self.config["default_tags"]:
            tags = dict(self.config["default_tags"])
            tags.update(parsed.tags)
            parsed = parsed.model_copy(update={"tags": TagMap(tags)})

        output_format = self.config["output_format"]
        if output_format == "json":
            return json_encode(parsed.jsondict(), compact=self.config["json_compact"])
        if isinstance(parsed, ServiceCheck):
            return parsed.to_line()
        return parsed.to_line(message_format=output_format)

    def process_lines(self, lines, output, source="<stdin>"):
        """Parse and write out `lines`, returns the number of rejected lines.

        `lines` may be text or UTF-8 encoded bytes, undecodable lines are
        rejected like any other malformed line."""
        rejected = 0
        for line_number, line in enumerate(lines, 1):
            line = line.rstrip(b"\r\n" if isinstance(line, bytes) else "\r\n")
            if not line.strip():
                continue
            try:
                parsed = parse_message(decode_line(line))
            except ParseError as ex:
                rejected += 1
                if self.config["on_error"] == "fail":
                    self.log.error("%s:%d: rejected %r: %s: %s", source, line_number, line, ex.__class__.__name__, ex)
                    raise
                if self.config["on_error"] == "log":
                    self.log.warning("%s:%d: rejected %r: %s: %s", source, line_number, line, ex.__class__.__name__, ex)
                else:
                    self.log.debug("%s:%d: ignored %r: %s", source, line_number, line, ex.__class__.__name__)
                continue
            output.write(self.format_output(parsed))
            output.write("\n")
        return rejected

    def run(self, args=None):
        parser = argparse.ArgumentParser(prog="statsdparser", description="(Dog)StatsD line parser")
        parser.add_argument("-D", "--debug", help="Enable debug logging", action="store_true")
        parser.add_argument("--version", action="version", help="show program version", version=version.__version__)
        parser.add_argument("--config", help="statsdparser config file", default=os.environ.get("STATSDPARSER_CONFIG"))
        parser.add_argument("--output-format", help="output format", choices=OUTPUT_FORMATS, default=None)
        parser.add_argument("--on-error", help="what to do with lines that fail to parse", choices=ON_ERROR_ACTIONS, default=None)
        parser.add_argument("files", help="files to read, default is stdin", nargs="*")
        args = parser.parse_args(args)

        self.set_config(args.config, {"output_format": args.output_format, "on_error": args.on_error})

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if args.debug else self.config["log_level"])
        if self.config["syslog"]:
            address = self.config["syslog_address"]
            if isinstance(address, list):
                address = tuple(address)
            logutil.set_syslog_handler(address, self.config["syslog_facility"], root_logger)

        rejected = 0
        try:
            if not args.files:
                rejected += self.process_lines(sys.stdin.buffer, sys.stdout)
            for filename in args.files:
                with open(filename, "rb") as fp:
                    rejected += self.process_lines(fp, sys.stdout, source=filename)
        except ParseError:
            return 1

        if rejected:
            self.log.info("%d line(s) rejected", rejected)
            if self.config["on_error"] == "log":
                return 1
        return 0


def main():
    logutil.configure_logging(level=logging.INFO, short_log=True)
    tool = StatsdParserTool()
    try:
        return tool.run()
    except KeyboardInterrupt:
        print("*** interrupted by keyboard ***", file=sys.stderr)
        return 1
    except (InvalidConfigurationError, OSError) as ex:
        tool.log.error("FATAL: %s: %s", ex.__class__.__name__, ex)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
