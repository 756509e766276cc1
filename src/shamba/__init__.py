"""Shamba: crop, livestock and pasture recommendations for Kenyan wards."""

__version__ = "1.0.0"
