from django.contrib import admin
from .models import Cart, CartLineItem, CartFee


class CartLineItemInline(admin.TabularInline):
    model = CartLineItem
    extra = 0
    readonly_fields = ("line_total_usd",)

    def line_total_usd(self, obj):
        return f"${obj.line_total:.2f}" if obj.pk else "$0.00"
    line_total_usd.short_description = "Line Total (USD)"


class CartFeeInline(admin.TabularInline):
    model = CartFee
    extra = 0
    readonly_fields = ("name", "amount", "taxable", "tax_class", "created_at")


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ("id", "status", "subtotal", "shipping_total", "total", "created_at")
    list_filter = ("status",)
    search_fields = ("id", "session_key")
    inlines = [CartLineItemInline, CartFeeInline]


@admin.register(CartFee)
class CartFeeAdmin(admin.ModelAdmin):
    list_display = ("cart", "name", "amount_usd", "taxable", "created_at")
    search_fields = ("cart__id", "name")
    list_filter = ("taxable",)

    def amount_usd(self, obj):
        return f"${obj.amount:.2f}"
    amount_usd.short_description = "Amount (USD)"
