from django.urls import path
from . import views

app_name = 'receipts'

urlpatterns = [
    path('process', views.ProcessReceiptView.as_view(), name='process'),
    path('<str:receipt_id>/points', views.ReceiptPointsView.as_view(), name='points'),
]
