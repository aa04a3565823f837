"""
Metrics and Analytics Module
"""
from .collector import MetricsCollector, PreparationRecord

__all__ = ['MetricsCollector', 'PreparationRecord']
