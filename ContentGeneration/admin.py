from django.contrib import admin

from .models import ContentItem


@admin.register(ContentItem)
class ContentItemAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'type', 'model', 'created_at']
    list_filter = ['type', 'model', 'created_at']
    search_fields = ['title', 'content', 'user__username']
    readonly_fields = ['user', 'title', 'content', 'type', 'model', 'created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')

    def has_add_permission(self, request):
        return False
