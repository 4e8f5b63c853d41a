"""
Query orchestration: fetching, decoding and printing sensor objects in turn.
"""
from sensorquery.domain.query import QueryReport, SensorQuery, query_sensor

__all__ = ["QueryReport", "SensorQuery", "query_sensor"]
