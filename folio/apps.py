from django.apps import AppConfig


class FolioConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'folio'
    verbose_name = 'Folio'
