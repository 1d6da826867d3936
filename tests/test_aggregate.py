"""Tests for multi-pollutant aggregation and presentation helpers."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from AQI import aggregate
from AQI.aggregate import (
    aqi_category,
    aqi_total,
    aqi_total_array,
    display_aqi,
    dominant_pollutant,
    sub_indices,
)
from AQI.constants.clip_const import CLIP_AQI


class TestAQITotal:
    """Tests for aqi_total and sub_indices."""

    def test_pm25_only(self):
        """Unused sensors are passed as 0 and never dominate."""
        assert aqi_total(500.4, 0, 0, 0, 0, 0, 0) == 500

    def test_all_zero(self):
        assert aqi_total() == 0

    def test_returns_maximum_pollutant(self):
        # PM2.5 12.0 -> 50, PM10 155 -> 101
        assert aqi_total(pm25=12.0, pm10=155) == 101

    def test_ozone_windows_combined(self):
        """Both ozone windows feed a single ozone sub-index."""
        assert aqi_total(o3_1h=0.13, o3_8h=0.06) == 107
        assert sub_indices(o3_1h=0.13, o3_8h=0.06)["o3"] == 107

    def test_positional_argument_order(self):
        """Arguments follow pm25, pm10, o3_1h, o3_8h, co, so2, no2."""
        assert aqi_total(0, 0, 0, 0, 0, 0, 100) == 100
        assert aqi_total(0, 0, 0, 0, 9.4, 0, 0) == 100
        assert aqi_total(0, 0, 0.164, 0, 0, 0, 0) == 150

    def test_sub_index_keys(self):
        assert set(sub_indices()) == {"pm2_5", "pm10", "o3", "co", "so2", "no2"}

    def test_total_is_max_of_sub_indices(self):
        readings = dict(pm25=40.0, pm10=150, o3_1h=0.1, o3_8h=0.07, co=5.0, so2=80, no2=60)
        assert aqi_total(**readings) == max(sub_indices(**readings).values())

    def test_extrapolated_total_is_not_clamped(self):
        assert aqi_total(pm25=600.0) == 566

    def test_idempotent(self):
        """Repeated evaluation gives the same answer."""
        readings = dict(pm25=40.0, pm10=150, co=5.0)
        assert aqi_total(**readings) == aqi_total(**readings)


class TestDominantPollutant:
    def test_dominant(self):
        assert dominant_pollutant(pm25=12.0, pm10=155) == "pm10"
        assert dominant_pollutant(o3_8h=0.3) == "o3"

    def test_ties_go_to_first(self):
        assert dominant_pollutant() == "pm2_5"


class TestAQITotalArray:
    """Tests for the vectorised aggregate."""

    def test_matches_scalar(self):
        pm25 = np.array([0.0, 12.0, 500.4, 40.0])
        pm10 = np.array([155.0, 0.0, 0.0, 150.0])
        expected = [aqi_total(p, q) for p, q in zip(pm25, pm10)]
        np.testing.assert_array_equal(aqi_total_array(pm25, pm10), expected)
        np.testing.assert_array_equal(expected, [101, 50, 500, 112])

    def test_nan_reading_skipped(self):
        """A missing pollutant does not blank the total."""
        pm25 = np.array([np.nan, 12.0])
        pm10 = np.array([np.nan, 0.0])
        np.testing.assert_array_equal(aqi_total_array(pm25, pm10), [0, 50])

    def test_all_nan_gives_nan(self):
        nan = np.array([np.nan])
        result = aqi_total_array(nan, nan, nan, nan, nan, nan, nan)
        assert np.isnan(result[0])

    def test_broadcasts_grids(self):
        pm25 = np.full((12, 3, 3), 12.0)
        result = aqi_total_array(pm25, 0, 0, 0, 0, 0, 0)
        assert result.shape == pm25.shape
        assert np.all(result == 50)


class TestCategory:
    @pytest.mark.parametrize(
        "aqi, name",
        [
            (0, "Good"),
            (50, "Good"),
            (51, "Moderate"),
            (100, "Moderate"),
            (150, "Unhealthy for Sensitive Groups"),
            (200, "Unhealthy"),
            (300, "Very Unhealthy"),
            (301, "Hazardous"),
            (500, "Hazardous"),
            (566, "Hazardous"),
        ],
    )
    def test_category_names(self, aqi, name):
        assert aqi_category(aqi) == name

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            aqi_category(-1)

    @pytest.mark.parametrize("aqi", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, aqi):
        """A missing reading has no category."""
        with pytest.raises(ValueError, match="finite"):
            aqi_category(aqi)


class TestDisplay:
    def test_clamps_for_display(self):
        assert display_aqi(566) == 500
        assert display_aqi(-3) == 0
        assert display_aqi(42) == 42

    def test_custom_bounds(self):
        assert display_aqi(250, {"min": 0, "max": 200}) == 200

    def test_default_bounds_resolved_per_call(self, monkeypatch):
        """The default range is looked up when called, not bound at import."""
        monkeypatch.setattr(aggregate, "CLIP_AQI", {"min": 0, "max": 300})
        assert display_aqi(400) == 300

    def test_default_bounds_untouched(self):
        display_aqi(566)
        assert CLIP_AQI == {"min": 0, "max": 500}
