from django.apps import AppConfig
from django.conf import settings
from django.utils.module_loading import import_string


class ReceiptsConfig(AppConfig):
    name = 'apps.receipts'
    label = 'receipts'
    verbose_name = 'Receipts'

    store = None

    def ready(self):
        # One store instance per process, owned by this app config
        store_class = import_string(settings.RECEIPTS_STORE_BACKEND)
        self.store = store_class()
