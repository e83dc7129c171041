# core/errors.py


class DashboardError(Exception):
    """Base class for errors surfaced to the admin."""


class OrderApiError(DashboardError):
    """The order API rejected a request or could not be reached."""


class ActionError(DashboardError):
    """A status update or add-product action failed. Local state is unchanged."""


class ValidationError(DashboardError):
    """Input rejected before any call to the order API."""
