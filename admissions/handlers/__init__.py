from admissions.handlers.views import ReceiptView, TicketPriceView

__all__ = ["TicketPriceView", "ReceiptView"]
