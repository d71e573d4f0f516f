from django.contrib import admin

from apps.product_management.admin import ProductAdmin
from apps.product_management.models import Product
from .forms import ProductAdditionalFeeForm


class ProductAdditionalFeeAdmin(ProductAdmin):
    form = ProductAdditionalFeeForm

    def get_form(self, request, obj=None, change=False, **kwargs):
        form_class = super().get_form(request, obj, change=change, **kwargs)
        user = request.user

        class UserBoundForm(form_class):
            def __init__(self, *args, **form_kwargs):
                form_kwargs.setdefault("user", user)
                super().__init__(*args, **form_kwargs)

        return UserBoundForm


if admin.site.is_registered(Product):
    admin.site.unregister(Product)
admin.site.register(Product, ProductAdditionalFeeAdmin)
