"""Create, get and update travels through the validation engine."""

import logging

from core.auth.interface import Identity
from core.db.repository import RecordNotFoundError, TravelRepository, UserDirectory
from core.errors import (
    ErrorCode,
    InvalidUserError,
    StorageError,
    TravelNotFoundError,
    TravelRejectedError,
    UnauthorizedError,
)
from core.models.travel import Travel, TravelRequest, TravelStatus
from core.services.validation import validate_update

logger = logging.getLogger(__name__)


class TravelService:
    """Sequences repository reads and writes around the validation engine.

    Business rules live in ``core.services.validation``; this class only maps
    storage outcomes to the error taxonomy in ``core.errors``.

    There is no lock between the read and the write of ``update``, so two
    concurrent updates of the same travel can overwrite each other.
    """

    def __init__(self, repository: TravelRepository, users: UserDirectory | None = None) -> None:
        self._repository = repository
        self._users = users

    def create(self, request: TravelRequest) -> Travel:
        """Store a new travel. Any supplied status is ignored; travels start pending."""
        self._check_user_exists(request.user_id)

        travel = Travel(from_=request.from_, to=request.to, user_id=request.user_id, status=TravelStatus.PENDING)
        try:
            created = self._repository.save_travel(travel)
        except Exception as e:
            logger.exception("Failed to save travel")
            raise StorageError(f"Save travel failed: {e}", code=ErrorCode.STORAGE_SAVE_FAILED) from e

        logger.info("Created travel %s", created.id)
        return created

    def get(self, travel_id: int) -> Travel:
        try:
            return self._repository.get_travel(travel_id)
        except RecordNotFoundError as e:
            logger.info("Travel %s not found", travel_id)
            raise TravelNotFoundError(travel_id) from e
        except Exception as e:
            logger.exception("Failed to get travel %s", travel_id)
            raise StorageError(f"Get travel {travel_id} failed: {e}", code=ErrorCode.STORAGE_GET_FAILED) from e

    def update(self, travel_id: int, request: TravelRequest, caller: Identity | None) -> Travel:
        """Apply *request* to the stored travel on behalf of *caller*.

        Raises:
            TravelNotFoundError: no travel with *travel_id*.
            UnauthorizedError: *caller* is None, or the engine denies access.
            TravelRejectedError: any other rule rejection from the engine.
            InvalidUserError: the assigned user does not exist.
            StorageError: the repository failed.
        """
        current = self.get(travel_id)

        if caller is None:
            logger.info("Rejected update of travel %s: no caller identity", travel_id)
            raise UnauthorizedError(f"No identity to update travel {travel_id}", code=ErrorCode.NO_IDENTITY)

        try:
            merged = validate_update(current, request, caller)
        except TravelRejectedError as e:
            logger.info("Rejected update of travel %s by user %s: %s", travel_id, caller.user_id, e.code.value)
            raise

        # Only reached once the caller has passed the access gates
        self._check_user_exists(merged.user_id)

        try:
            self._repository.edit_travel(merged)
        except Exception as e:
            logger.exception("Failed to update travel %s", travel_id)
            raise StorageError(f"Update travel {travel_id} failed: {e}", code=ErrorCode.STORAGE_UPDATE_FAILED) from e

        logger.info("Updated travel %s to %s", travel_id, merged.status.value)
        return merged

    def _check_user_exists(self, user_id: int) -> None:
        if not user_id or self._users is None:
            return

        try:
            exists = self._users.user_exists(user_id)
        except Exception as e:
            logger.exception("Failed to look up user %s", user_id)
            raise StorageError(f"User lookup {user_id} failed: {e}", code=ErrorCode.STORAGE_USER_GET_FAILED) from e

        if not exists:
            raise InvalidUserError(f"User {user_id} does not exist", code=ErrorCode.INVALID_TRAVEL_USER)
