"""Verify that main modules are importable."""


def test_import_rulops() -> None:
    import rulops
    assert rulops.__version__ == "0.1.0"


def test_import_core() -> None:
    from rulops.core import RULPredictor, RULModel, PrognosticsConfig, predict_fleet_rul
    assert RULPredictor is not None
    assert RULModel is not None
    assert PrognosticsConfig is not None
    assert predict_fleet_rul is not None


def test_import_fitting() -> None:
    from rulops.fitting import linear_regression, polynomial_regression, confidence_interval
    assert linear_regression is not None
    assert polynomial_regression is not None
    assert confidence_interval is not None


def test_import_smoothing() -> None:
    from rulops.smoothing import exponential_smoothing, double_exponential_smoothing, optimize_parameters
    assert exponential_smoothing is not None
    assert double_exponential_smoothing is not None
    assert optimize_parameters is not None


def test_import_health() -> None:
    from rulops.health import calculate_rul, weibull_cdf, hazard_rate, calculate_mtbf, WeibullRULModel
    assert calculate_rul is not None
    assert weibull_cdf is not None
    assert hazard_rate is not None
    assert calculate_mtbf is not None
    assert WeibullRULModel is not None


def test_import_io() -> None:
    from rulops.io import save_config, load_config, prediction_to_dict, series_from_records
    assert save_config is not None
    assert load_config is not None
    assert prediction_to_dict is not None
    assert series_from_records is not None
