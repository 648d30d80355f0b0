"""User-facing attendance messages. Each failure condition has its own text."""

from __future__ import annotations

from ..core.enums import LeaveKind

NEED_PUNCH_IN = "No punch recorded yet today. Punch in to start your day."
READY_FOR_PUNCH_OUT = "Confirm the pop-up when you punch out to save your day."
COMPLETED = "Today's punches are all saved. Good work!"
LEAVE_FALLBACK_LABEL = "Leave"
ON_LEAVE_TEMPLATE = "{label} is registered for today. Ask an admin if it needs to change."

ALREADY_PUNCHED_IN = "already punched in"
NEEDS_PRIOR_PUNCH_IN = "needs prior punch-in"
ALREADY_PUNCHED_OUT = "already punched out"
UNSUPPORTED_KIND = "unsupported kind"

FORBIDDEN = "You are not allowed to use attendance."
BLOCKED_BY_LEAVE = "Punches are blocked today because leave is registered."
LOAD_FAILED = "Could not load today's attendance."
SAVE_FAILED = "Could not save the punch."

CALENDAR_FORBIDDEN = "You are not allowed to view the leave calendar."
INVALID_YEAR = "Invalid year."
INVALID_MONTH = "Invalid month."
CALENDAR_LOAD_FAILED = "Could not load the leave calendar."

LEAVE_LABELS = {
    LeaveKind.ANNUAL_LEAVE: "Annual leave",
    LeaveKind.HALF_DAY_AM: "Half day (AM)",
    LeaveKind.HALF_DAY_PM: "Half day (PM)",
    LeaveKind.SICK_LEAVE: "Sick leave",
    LeaveKind.BUSINESS_TRIP: "Business trip",
    LeaveKind.OTHER: "Other",
}
