from django import forms
from django.utils.translation import gettext_lazy as _

from apps.product_management.models import Product
from .conf import get_fee_settings
from .data_transfer_objects import FEE_FIELD, NONCE_FIELD
from .nonces import SAVE_PRODUCT_ACTION, create_nonce
from .stores import ProductFeeConfigStore
from .utils import parse_percentage


class ProductAdditionalFeeForm(forms.ModelForm):
    """
    Product form carrying the additional fee input and its nonce.

    The fee is not a model field; the ``product_saved`` listener stores it
    from the submitted data.
    """
    additional_admin_fee = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "%"}),
    )
    additional_fee_nonce = forms.CharField(required=False, widget=forms.HiddenInput())

    class Meta:
        model = Product
        fields = "__all__"

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        fee_settings = get_fee_settings()

        fee_field = self.fields[FEE_FIELD]
        fee_field.label = _(fee_settings.title)
        fee_field.help_text = _(fee_settings.description)
        if self.instance.pk:
            fee_field.initial = ProductFeeConfigStore(fee_settings.meta_key).get(self.instance.pk) or ""

        self.fields[NONCE_FIELD].initial = create_nonce(SAVE_PRODUCT_ACTION, getattr(user, "pk", None))

    def clean_additional_admin_fee(self):
        value = (self.cleaned_data.get(FEE_FIELD) or "").strip()
        if value and parse_percentage(value) is None:
            raise forms.ValidationError(_("Enter a number."))
        return value
