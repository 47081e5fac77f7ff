from .comparison import ComparisonResult, NotificationMessage

__all__ = ["ComparisonResult", "NotificationMessage"]
