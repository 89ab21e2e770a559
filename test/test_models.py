import pydantic
import pytest

from statsdparser import MetricType, ParseResult, ServiceCheck, ServiceCheckStatus, parse


class TestParseResult:
    def test_defaults(self):
        result = ParseResult(name="gorets", value=1, metric_type="c")
        assert result.metric_type is MetricType.counter
        assert result.sample_rate == 1.0
        assert result.tags == {}

    def test_is_immutable(self):
        result = parse("gorets:1|c|#a:b")
        with pytest.raises(pydantic.ValidationError):
            result.value = 2.0
        with pytest.raises(TypeError):
            result.tags["injected"] = "x"  # pylint: disable=unsupported-assignment-operation
        assert result.tags == {"a": "b"}

    def test_is_hashable(self):
        assert hash(parse("gorets:1|c|#a:b,c:d")) == hash(parse("gorets:1|c|#c:d,a:b"))
        assert len({parse("gorets:1|c|#a:b"), parse("gorets:1|c|#a:b"), parse("gorets:1|c")}) == 2

    def test_tags_are_copied_from_input(self):
        tags = {"a": "b"}
        result = ParseResult(name="gorets", value=1, metric_type="c", tags=tags)
        tags["a"] = "changed"
        assert result.tags == {"a": "b"}

    @pytest.mark.parametrize(
        "fields", [
            {"name": ""},
            {"sample_rate": 0.0},
            {"sample_rate": 1.5},
            {"value": float("inf")},
            {"value": float("nan")},
            {"sample_rate": float("nan")},
            {"metric_type": "d"},
            {"unexpected": True},
        ]
    )
    def test_rejects_invalid_fields(self, fields):
        values = {"name": "gorets", "value": 1.0, "metric_type": MetricType.counter}
        values.update(fields)
        with pytest.raises(pydantic.ValidationError):
            ParseResult(**values)

    def test_jsondict(self):
        result = parse("gorets:1|ms|@0.5|#dc:ams01")
        assert result.jsondict() == {
            "name": "gorets",
            "value": 1.0,
            "metric_type": "ms",
            "sample_rate": 0.5,
            "tags": {"dc": "ams01"},
        }


class TestServiceCheck:
    def test_tags_are_read_only(self):
        check = ServiceCheck(name="disk", tags={"env": "prod"})
        with pytest.raises(TypeError):
            check.tags["env"] = "dev"  # pylint: disable=unsupported-assignment-operation
        assert hash(check) == hash(ServiceCheck(name="disk", tags={"env": "prod"}))

    def test_rejects_infinite_timestamp(self):
        with pytest.raises(pydantic.ValidationError):
            ServiceCheck(name="disk", timestamp=float("inf"))

    def test_jsondict(self):
        check = ServiceCheck(name="disk", status=ServiceCheckStatus.warning, hostname="db1")
        assert check.jsondict() == {
            "name": "disk",
            "status": 1,
            "timestamp": None,
            "hostname": "db1",
            "tags": {},
            "message": None,
        }


def test_metric_type_str_is_wire_token():
    assert str(MetricType.timer) == "ms"
    assert MetricType("ms") is MetricType.timer
    assert [metric_type.value for metric_type in MetricType] == ["c", "g", "ms", "h", "s", "m"]
