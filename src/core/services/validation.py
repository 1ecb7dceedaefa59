"""Travel update validation engine.

Pure decision logic: given the stored travel, the proposed state and the
caller identity, either return the merged travel to persist or raise the
rejection for the first rule that fails. Rule order is part of the
contract since it decides which single error a caller sees when several
rules are broken: authorization first, then location edits, then status
value, assignment, and finally the status transition itself.
"""

from core.auth.interface import Identity
from core.errors import (
    ErrorCode,
    InvalidLocationEditError,
    InvalidStatusError,
    InvalidUserError,
    UnauthorizedError,
)
from core.models.travel import STATUS_FLOW, Travel, TravelRequest, TravelStatus


def status_index(status: str) -> int:
    """Position of *status* in the lifecycle flow, or -1 if it is not part of it."""
    for index, candidate in enumerate(STATUS_FLOW):
        if candidate.value == status:
            return index
    return -1


def can_transition(current: str, target: str) -> bool:
    """Only staying in place or advancing exactly one step is legal."""
    cur = status_index(current)
    new = status_index(target)
    if cur == -1 or new == -1:
        return False
    return new == cur or new == cur + 1


def _check_access(current: Travel, proposed: TravelRequest, caller: Identity) -> None:
    if caller.is_admin:
        return

    if current.user_id != caller.user_id:
        raise UnauthorizedError(
            f"User {caller.user_id} does not own travel {current.id}",
            code=ErrorCode.ACCESS_DENIED,
        )

    if proposed.user_id != current.user_id and current.is_assigned:
        raise UnauthorizedError(
            f"User {caller.user_id} cannot reassign travel {current.id} to {proposed.user_id}",
            code=ErrorCode.ACCESS_DENIED,
        )


def _check_locations(current: Travel, proposed: TravelRequest) -> None:
    before = (current.from_.latitude, current.from_.longitude, current.to.latitude, current.to.longitude)
    after = (proposed.from_.latitude, proposed.from_.longitude, proposed.to.latitude, proposed.to.longitude)
    if before != after and current.status is not TravelStatus.PENDING:
        raise InvalidLocationEditError(
            f"Travel {current.id} is {current.status.value}, locations are locked",
            code=ErrorCode.INVALID_LOCATION_EDIT,
        )


def _check_assignment(current: Travel, proposed: TravelRequest) -> None:
    if not proposed.is_assigned and current.status is not TravelStatus.PENDING:
        raise InvalidUserError(
            f"Travel {current.id} is {current.status.value} and cannot be unassigned",
            code=ErrorCode.INVALID_USER,
        )

    if not proposed.is_assigned and proposed.status != TravelStatus.PENDING:
        raise InvalidUserError(
            f"Travel {current.id} needs a user to become {proposed.status}",
            code=ErrorCode.INVALID_USER,
        )

    if proposed.user_id != current.user_id and current.is_assigned and proposed.status != TravelStatus.PENDING:
        raise InvalidUserError(
            f"Travel {current.id} can only change owner while pending",
            code=ErrorCode.INVALID_USER,
        )


def validate_update(current: Travel, proposed: TravelRequest, caller: Identity) -> Travel:
    """Return *current* with the proposed changes applied, or raise a TravelRejectedError.

    Args:
        current: The travel as currently persisted.
        proposed: The full desired state; status and both locations are required.
        caller: The identity performing the update.

    Raises:
        UnauthorizedError: caller is neither owner nor admin, or a non-admin reassigns.
        InvalidLocationEditError: locations changed while the travel is not pending.
        InvalidStatusError: unknown status, or a transition other than same/next step.
        InvalidUserError: assignment missing where required, or owner changed outside pending.
    """
    _check_access(current, proposed, caller)
    _check_locations(current, proposed)

    if status_index(proposed.status) == -1:
        raise InvalidStatusError(f"Unknown travel status {proposed.status!r}", code=ErrorCode.INVALID_STATUS)

    _check_assignment(current, proposed)

    if not can_transition(current.status.value, proposed.status):
        raise InvalidStatusError(
            f"Travel {current.id} cannot move from {current.status.value} to {proposed.status}",
            code=ErrorCode.INVALID_STATUS,
        )

    return current.model_copy(
        update={
            "status": TravelStatus(proposed.status),
            "user_id": proposed.user_id,
            "from_": proposed.from_,
            "to": proposed.to,
        }
    )
