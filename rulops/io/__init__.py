"""Input/output: records from storage, JSON config and result export."""

from rulops.io.records import sample_from_record, samples_from_records, series_from_records
from rulops.io.serializers import (
    fleet_to_dict,
    load_config,
    prediction_to_dict,
    save_config,
    save_predictions,
)

__all__ = [
    "sample_from_record",
    "samples_from_records",
    "series_from_records",
    "prediction_to_dict",
    "fleet_to_dict",
    "save_predictions",
    "save_config",
    "load_config",
]
