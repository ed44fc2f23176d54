from tuition_api.models.payment import PaymentRecord, NotificationStatus

__all__ = ["PaymentRecord", "NotificationStatus"]
