class NotificationError(Exception):
    """Raised when the desktop notification service fails to show a toast."""
    pass
