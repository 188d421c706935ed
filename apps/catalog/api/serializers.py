from rest_framework import serializers
from apps.catalog.models import (
    Brand,
    Category,
    Collection,
    PackType,
    Product,
    ProductImage,
    ProductVariant,
)


# =============================================================================
# Lookup Serializers
# =============================================================================

class BrandSerializer(serializers.ModelSerializer):
    class Meta:
        model = Brand
        fields = ['id', 'name', 'slug', 'logo_url']


class CategorySerializer(serializers.ModelSerializer):
    parent = serializers.SlugRelatedField(slug_field='slug', read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'parent', 'full_path']


class CollectionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Collection
        fields = ['id', 'name', 'slug', 'description']


class PackTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = PackType
        fields = ['id', 'name', 'slug', 'card_count', 'sort_order']


# =============================================================================
# Image Serializer
# =============================================================================

class ProductImageSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = ProductImage
        fields = ['id', 'url', 'alt_text', 'sort_order', 'is_primary']

    def get_url(self, obj):
        request = self.context.get('request')
        if request:
            return request.build_absolute_uri(obj.image.url)
        return obj.image.url


# =============================================================================
# Variant Serializer
# =============================================================================

class ProductVariantSerializer(serializers.ModelSerializer):
    pack_type = PackTypeSerializer(read_only=True)
    effective_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    is_on_sale = serializers.BooleanField(read_only=True)
    discount_percentage = serializers.IntegerField(read_only=True)

    class Meta:
        model = ProductVariant
        fields = [
            'id', 'sku', 'pack_type', 'price', 'sale_price', 'effective_price',
            'is_on_sale', 'discount_percentage', 'in_stock', 'weight',
            'dimensions', 'created_at'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Card data for listings."""
    brand = serializers.SlugRelatedField(slug_field='slug', read_only=True)
    category = serializers.SlugRelatedField(slug_field='slug', read_only=True)
    display_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    variant_count = serializers.IntegerField(read_only=True)
    primary_image = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'brand', 'category', 'display_price',
            'variant_count', 'primary_image', 'created_at'
        ]

    def get_primary_image(self, obj):
        image = obj.primary_image
        if not image:
            return None
        return ProductImageSerializer(image, context=self.context).data['url']


class ProductDetailSerializer(serializers.ModelSerializer):
    """Full product with variants, images and collections."""
    brand = BrandSerializer(read_only=True)
    category = CategorySerializer(read_only=True)
    collections = CollectionSerializer(many=True, read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)
    images = ProductImageSerializer(many=True, read_only=True)
    default_variant = serializers.PrimaryKeyRelatedField(read_only=True)
    display_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'brand', 'category', 'collections',
            'default_variant', 'display_price', 'variants', 'images',
            'created_at', 'updated_at'
        ]
