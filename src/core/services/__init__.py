"""
Business services for Space Drivers.

- validation.py: pure travel update rules (access, locations, assignment, status flow)
- travel.py: TravelService orchestrating storage around the rules
- migration.py: Alembic migrations for the travels/users schema
"""

from core.services.travel import TravelService
from core.services.validation import can_transition, validate_update

__all__ = ["TravelService", "can_transition", "validate_update"]
