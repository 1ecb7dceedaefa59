"""
Core business logic package for Space Drivers.

Travel models, the update validation engine, persistence and authentication live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
