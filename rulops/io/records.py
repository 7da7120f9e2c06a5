"""Build health samples from plain records handed over by a storage layer."""

from datetime import datetime
from typing import Any, Iterable, List, Mapping, Union

from rulops.core.types import HealthSample, HealthSeries

Record = Union[HealthSample, Mapping[str, Any], tuple]


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        # fromisoformat rejects a trailing "Z" before Python 3.11
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def sample_from_record(record: Record) -> HealthSample:
    """
    Accepts a HealthSample, a (timestamp, health_score) tuple, or a mapping
    with "timestamp" and "health_score" (or "healthScore") keys. Timestamps
    may be datetimes or ISO-8601 strings.
    """
    if isinstance(record, HealthSample):
        return record
    if isinstance(record, tuple):
        timestamp, score = record
    elif isinstance(record, Mapping):
        timestamp = record["timestamp"]
        score = record["health_score"] if "health_score" in record else record["healthScore"]
    else:
        raise TypeError(f"Unsupported health record type: {type(record).__name__}")
    return HealthSample(timestamp=_parse_timestamp(timestamp), health_score=float(score))


def samples_from_records(records: Iterable[Record]) -> List[HealthSample]:
    return [sample_from_record(r) for r in records]


def series_from_records(asset_id: str, records: Iterable[Record]) -> HealthSeries:
    return HealthSeries(asset_id=asset_id, samples=tuple(samples_from_records(records)))
