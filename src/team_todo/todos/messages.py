"""User-facing todo messages. Each failure condition has its own text."""

from __future__ import annotations

from ..core.enums import TodoStatus

FORBIDDEN = "You are not allowed to use todos."
CREATE_FORBIDDEN = "You are not allowed to create todos."
DELETE_FORBIDDEN = "Only admins can delete todos."
NOT_ASSIGNED = "You can only change todos assigned to you."
LOCKED = "The edit window has closed. Ask an admin to make this change."
NOT_FOUND = "Todo not found."
NO_FIELDS = "Choose at least one field to update."
UNKNOWN_FIELD = "Field cannot be updated: {name}"
INVALID_STATUS = "Invalid todo status."

LOAD_FAILED = "Could not load todos."
SAVE_FAILED = "Could not save the todo."
DELETE_FAILED = "Could not delete the todo."

STATUS_LABELS = {
    TodoStatus.PREWORK: "Pre-work",
    TodoStatus.DESIGN: "In design",
    TodoStatus.HOLD: "On hold",
    TodoStatus.PO_PLACED: "PO placed",
    TodoStatus.INCOMING: "Incoming",
}
