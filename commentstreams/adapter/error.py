"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NotificationDeliveryError(AdapterError):
    """Notification endpoint rejected or failed to receive a notification."""

    pass
