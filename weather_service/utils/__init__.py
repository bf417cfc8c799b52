"""Utility helpers."""
from weather_service.utils.colored_logger import get_component_logger, setup_colored_logging

__all__ = ["get_component_logger", "setup_colored_logging"]
