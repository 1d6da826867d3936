"""Tests for the AQI engine."""
