from django.contrib import admin

from .models import Node


@admin.register(Node)
class NodeAdmin(admin.ModelAdmin):
    """Nodes are immutable, so the admin only lets staff browse them."""
    list_display = ("id", "value", "operation", "operand", "parent", "author", "created_at")
    list_filter = ("operation", "created_at")
    search_fields = ("id", "author__username")
    raw_id_fields = ("parent", "author")
    readonly_fields = ("id", "value", "operation", "operand", "parent", "author", "created_at")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
