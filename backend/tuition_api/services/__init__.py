from tuition_api.services.notification_service import EmailNotifier, DeliveryResult
from tuition_api.services.sheets_service import SheetsClient
from tuition_api.services.payment_service import PaymentService

__all__ = ["EmailNotifier", "DeliveryResult", "SheetsClient", "PaymentService"]
