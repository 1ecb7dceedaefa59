"""
Pydantic models for Space Drivers.
"""

from core.models.travel import STATUS_FLOW, Point, Travel, TravelRequest, TravelStatus

__all__ = ["Point", "STATUS_FLOW", "Travel", "TravelRequest", "TravelStatus"]
