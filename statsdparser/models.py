"""
statsdparser - parse result models

See LICENSE for details
"""
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from statsdparser.common import MetricType, ServiceCheckStatus, TagMap
from statsdparser.formatter import format_metric, format_service_check


class StatsdModel(BaseModel):
    model_config = ConfigDict(
        # Results are values handed over to the caller, they're never
        # updated in place
        frozen=True,
        # Extra values are most likely typos in code constructing the
        # models directly
        extra="forbid",
        validate_default=True,
    )

    @field_validator("tags", check_fields=False)
    @classmethod
    def freeze_tags(cls, tags):
        return TagMap(tags)

    @field_serializer("tags", check_fields=False)
    def serialize_tags(self, tags) -> Dict[str, str]:
        return dict(tags)

    def jsondict(self):
        return self.model_dump(mode="json")


class ParseResult(StatsdModel):
    name: str = Field(min_length=1)
    value: float = Field(allow_inf_nan=False)
    metric_type: MetricType
    sample_rate: float = Field(1.0, gt=0.0, le=1.0, allow_inf_nan=False)
    tags: Mapping[str, str] = Field(default_factory=TagMap)

    def to_line(self, message_format="datadog"):
        return format_metric(self, message_format=message_format)


class ServiceCheck(StatsdModel):
    name: str = Field(min_length=1)
    status: ServiceCheckStatus = ServiceCheckStatus.unknown
    timestamp: Optional[float] = Field(None, allow_inf_nan=False)
    hostname: Optional[str] = None
    tags: Mapping[str, str] = Field(default_factory=TagMap)
    message: Optional[str] = None

    def to_line(self):
        return format_service_check(self)
