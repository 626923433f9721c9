"""Metrics with typed text values, properties, groups and an in-memory metric database."""

__version__ = "1.0.0"
__all__ = ["metrictype", "metrichelper", "metricproperty", "metricgroup", "metric", "metricdatabase"]