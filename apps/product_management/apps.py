from django.apps import AppConfig


class ProductManagementConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.product_management"
    verbose_name = "Product Management"
