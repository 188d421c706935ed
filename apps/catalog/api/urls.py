from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    BrandViewSet,
    CategoryViewSet,
    CollectionViewSet,
    PackTypeViewSet,
    ProductViewSet,
)

app_name = 'catalog-api'

router = DefaultRouter()
router.register(r'products', ProductViewSet, basename='product')
router.register(r'pack-types', PackTypeViewSet, basename='pack-type')
router.register(r'brands', BrandViewSet, basename='brand')
router.register(r'categories', CategoryViewSet, basename='category')
router.register(r'collections', CollectionViewSet, basename='collection')

urlpatterns = [
    path('', include(router.urls)),
]
