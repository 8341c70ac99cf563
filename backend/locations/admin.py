from django.contrib import admin
from django.contrib.gis.admin import GISModelAdmin
from .models import Country, Location, PlaceTag, Tag


class PlaceTagInline(admin.TabularInline):
    model = PlaceTag
    extra = 1
    autocomplete_fields = ['tag']


@admin.register(Location)
class LocationAdmin(GISModelAdmin):
    """
    Admin interface for Location with geospatial support.
    GISModelAdmin provides map interface for location data.
    """
    list_display = ['name', 'country', 'external_id', 'created_at']
    list_filter = ['country', 'tags']
    search_fields = ['name', 'address', 'external_id']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [PlaceTagInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'external_id', 'name', 'address', 'description', 'links')
        }),
        ('Location', {
            'fields': ('location', 'country')
        }),
        ('Icon', {
            'fields': ('icon_prefix', 'icon_suffix')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'icon_prefix', 'icon_suffix']
    search_fields = ['name']


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'flag']
    search_fields = ['name', 'code']
