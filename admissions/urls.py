from django.urls import path

from admissions.handlers import ReceiptView, TicketPriceView

urlpatterns = [
    path("tickets/price", TicketPriceView.as_view(), name="ticket-price"),
    path("tickets/receipt", ReceiptView.as_view(), name="ticket-receipt"),
]
