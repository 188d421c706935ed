from rest_framework import viewsets, filters
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.filters import ProductFilter
from apps.catalog.models import (
    Brand,
    Category,
    Collection,
    PackType,
    Product,
)
from .serializers import (
    BrandSerializer,
    CategorySerializer,
    CollectionSerializer,
    PackTypeSerializer,
    ProductListSerializer,
    ProductDetailSerializer,
)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for published products.

    list: Filter with the storefront facets
          (?festival=edc&category=venue-cards&packType=deluxe&price=15-30)
    retrieve: Product detail with variants, images and collections
    """
    queryset = Product.objects.published().with_listing_data()
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        return ProductDetailSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('collections')
        return queryset


class PackTypeViewSet(viewsets.ReadOnlyModelViewSet):
    """API endpoint for pack tiers (Standard, Deluxe, Premium)."""
    queryset = PackType.objects.all()
    serializer_class = PackTypeSerializer
    lookup_field = 'slug'
    pagination_class = None


class BrandViewSet(viewsets.ReadOnlyModelViewSet):
    """API endpoint for festival organisers."""
    queryset = Brand.objects.all()
    serializer_class = BrandSerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter]
    search_fields = ['name']
    pagination_class = None


class CategoryViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Category.objects.select_related('parent')
    serializer_class = CategorySerializer
    lookup_field = 'slug'
    pagination_class = None


class CollectionViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Collection.objects.all()
    serializer_class = CollectionSerializer
    lookup_field = 'slug'
    pagination_class = None
