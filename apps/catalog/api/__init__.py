from .serializers import (
    BrandSerializer,
    CategorySerializer,
    CollectionSerializer,
    PackTypeSerializer,
    ProductImageSerializer,
    ProductVariantSerializer,
    ProductListSerializer,
    ProductDetailSerializer,
)

__all__ = [
    'BrandSerializer',
    'CategorySerializer',
    'CollectionSerializer',
    'PackTypeSerializer',
    'ProductImageSerializer',
    'ProductVariantSerializer',
    'ProductListSerializer',
    'ProductDetailSerializer',
]
