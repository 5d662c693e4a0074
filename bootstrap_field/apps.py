# bootstrap_field/apps.py
from django.apps import AppConfig


class BootstrapFieldConfig(AppConfig):
    name = "bootstrap_field"
    verbose_name = "Bootstrap active field"
