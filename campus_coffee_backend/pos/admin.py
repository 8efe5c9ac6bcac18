from django.contrib import admin

from .models import PointOfSale

# =====================================================
# POINT OF SALE ADMIN
# =====================================================


@admin.register(PointOfSale)
class PointOfSaleAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "type",
        "campus",
        "city",
        "updated_at",
    )
    list_filter = ("campus", "type")
    search_fields = ("name", "street", "city")
    ordering = ("id",)
    readonly_fields = ("created_at", "updated_at")

    # no deletes, same as the API
    def has_delete_permission(self, request, obj=None):
        return False
