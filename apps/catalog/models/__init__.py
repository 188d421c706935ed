"""
Catalog models for the festival trading-card storefront.

Model Hierarchy:
- Brand: Festival organiser (Coachella, Tomorrowland)
- Category: Kind of pack (Artist Cards, Venue Cards)
- Collection: Seasonal grouping, joined to products via ProductCollection
- PackType: Tier with a card count (Standard, Deluxe, Premium)
- Product: A pack line with images and a default variant
- ProductVariant: Individual SKU with price, stock and pack type
"""

from .brand import Brand
from .category import Category
from .collection import Collection, ProductCollection
from .pack_type import PackType
from .product import Product, ProductImage
from .variant import ProductVariant

__all__ = [
    'Brand',
    'Category',
    'Collection',
    'ProductCollection',
    'PackType',
    'Product',
    'ProductImage',
    'ProductVariant',
]
