from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Brand,
    Category,
    Collection,
    PackType,
    Product,
    ProductCollection,
    ProductImage,
    ProductVariant,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductVariantResource(resources.ModelResource):
    """Resource for importing/exporting variants, keyed by SKU."""

    product_name = fields.Field(
        column_name='product_name',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'name')
    )
    pack_type_slug = fields.Field(
        column_name='pack_type',
        attribute='pack_type',
        widget=ForeignKeyWidget(PackType, 'slug')
    )

    class Meta:
        model = ProductVariant
        import_id_fields = ['sku']
        fields = (
            'sku', 'product_name', 'pack_type_slug', 'price', 'sale_price',
            'in_stock', 'weight'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ProductImageInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductImage
    extra = 1
    fields = ['image', 'alt_text', 'is_primary', 'sort_order', 'image_preview']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        if obj.image:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.image.url
            )
        return '-'
    image_preview.short_description = 'Preview'


class ProductCollectionInline(admin.TabularInline):
    model = ProductCollection
    extra = 1
    autocomplete_fields = ['collection']


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ['sku', 'pack_type', 'price', 'sale_price', 'in_stock']
    show_change_link = True


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'product_count']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = 'Products'


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent']
    list_filter = ['parent']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Collection)
class CollectionAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'created_at']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(PackType)
class PackTypeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'card_count', 'sort_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Product)
class ProductAdmin(SortableAdminBase, SimpleHistoryAdmin):
    list_display = ['name', 'brand', 'category', 'variant_count', 'is_published', 'created_at']
    list_filter = ['is_published', 'brand', 'category', 'collections']
    list_editable = ['is_published']
    search_fields = ['name', 'description']
    autocomplete_fields = ['brand', 'category']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ProductVariantInline, ProductImageInline, ProductCollectionInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'description', 'brand', 'category', 'is_published')
        }),
        ('Variants', {
            'fields': ('default_variant',)
        }),
        ('Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['publish', 'unpublish']

    def formfield_for_foreignkey(self, db_field, request, **kwargs):
        # Only this product's own variants can be its default
        if db_field.name == 'default_variant':
            object_id = request.resolver_match.kwargs.get('object_id')
            kwargs['queryset'] = ProductVariant.objects.filter(product_id=object_id)
        return super().formfield_for_foreignkey(db_field, request, **kwargs)

    @admin.action(description='Publish selected products')
    def publish(self, request, queryset):
        count = queryset.update(is_published=True)
        self.message_user(request, f'{count} products published.')

    @admin.action(description='Unpublish selected products')
    def unpublish(self, request, queryset):
        count = queryset.update(is_published=False)
        self.message_user(request, f'{count} products unpublished.')


@admin.register(ProductVariant)
class ProductVariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductVariantResource
    list_display = [
        'sku', 'product', 'pack_type', 'price', 'sale_price',
        'in_stock', 'stock_status'
    ]
    list_filter = ['pack_type', 'product__brand']
    list_editable = ['price', 'sale_price', 'in_stock']
    search_fields = ['sku', 'product__name']
    autocomplete_fields = ['product']
    readonly_fields = ['created_at', 'is_on_sale', 'discount_percentage']
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product', 'pack_type', 'sku')
        }),
        ('Pricing', {
            'fields': ('price', 'sale_price', 'is_on_sale', 'discount_percentage')
        }),
        ('Stock', {
            'fields': ('in_stock',)
        }),
        ('Physical', {
            'fields': ('weight', 'dimensions'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_out_of_stock', 'clear_sale_price']

    def stock_status(self, obj):
        if obj.in_stock <= 0:
            return format_html('<span style="color: red;">Out of stock</span>')
        if obj.in_stock <= 10:
            return format_html('<span style="color: orange;">Low stock</span>')
        return format_html('<span style="color: green;">In stock</span>')
    stock_status.short_description = 'Stock status'

    @admin.action(description='Mark as out of stock')
    def mark_out_of_stock(self, request, queryset):
        count = queryset.update(in_stock=0)
        self.message_user(request, f'{count} variants updated.')

    @admin.action(description='Remove sale price')
    def clear_sale_price(self, request, queryset):
        count = queryset.update(sale_price=None)
        self.message_user(request, f'{count} variants updated.')


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'RaveCards Admin'
admin.site.site_title = 'RaveCards'
admin.site.index_title = 'Store administration'
