"""Shared fixtures for the storefront test suite."""

from decimal import Decimal

import pytest

from apps.catalog.models import Brand, Category, PackType, Product, ProductVariant


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploads out of the working tree."""
    settings.MEDIA_ROOT = tmp_path / 'media'
    return settings.MEDIA_ROOT


@pytest.fixture
def pack_types(db):
    return {
        'standard': PackType.objects.create(name='Standard', slug='standard', card_count=8, sort_order=0),
        'deluxe': PackType.objects.create(name='Deluxe', slug='deluxe', card_count=15, sort_order=1),
        'premium': PackType.objects.create(name='Premium', slug='premium', card_count=25, sort_order=2),
    }


@pytest.fixture
def brands(db):
    return {
        'coachella': Brand.objects.create(name='Coachella', slug='coachella'),
        'edc': Brand.objects.create(name='Electric Daisy Carnival', slug='edc'),
    }


@pytest.fixture
def categories(db):
    return {
        'artist-cards': Category.objects.create(name='Artist Cards', slug='artist-cards'),
        'venue-cards': Category.objects.create(name='Venue Cards', slug='venue-cards'),
    }


@pytest.fixture
def make_product(db, pack_types):
    """
    Factory: make_product('Pack', brand=..., variants={'standard': ('12.99', None)})
    Variant tuples are (price, sale_price). The first variant becomes the default.
    """
    counter = {'sku': 0}

    def _make(name, brand=None, category=None, variants=None, published=True):
        product = Product.objects.create(
            name=name,
            brand=brand,
            category=category,
            is_published=published,
        )
        variants = variants or {'standard': ('12.99', None)}
        for slug, (price, sale_price) in variants.items():
            counter['sku'] += 1
            variant = ProductVariant.objects.create(
                product=product,
                pack_type=pack_types[slug],
                sku=f"TEST-{counter['sku']:04d}",
                price=Decimal(price),
                sale_price=Decimal(sale_price) if sale_price else None,
                in_stock=10,
            )
            if product.default_variant_id is None:
                product.default_variant = variant
                product.save(update_fields=['default_variant'])
        return product

    return _make
