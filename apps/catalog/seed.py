"""
Sample catalog data for the festival trading-card store.

Reference rows (brands, categories, collections, pack types) are inserted
only when no row with the same slug exists, so they never duplicate.
Products are generated on every run, each with three pack-type variants,
one image and one to three collections.

There is no transaction around the run: a failure half way leaves the rows
inserted so far in place.
"""

import logging
import random
import shutil
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from django.conf import settings

from apps.catalog.models import (
    Brand,
    Category,
    Collection,
    PackType,
    Product,
    ProductCollection,
    ProductImage,
    ProductVariant,
)

logger = logging.getLogger(__name__)

BRANDS = [
    {'name': 'Coachella', 'slug': 'coachella'},
    {'name': 'Lollapalooza', 'slug': 'lollapalooza'},
    {'name': 'Bonnaroo', 'slug': 'bonnaroo'},
    {'name': 'Electric Daisy Carnival', 'slug': 'edc'},
    {'name': 'Burning Man', 'slug': 'burning-man'},
    {'name': 'Tomorrowland', 'slug': 'tomorrowland'},
    {'name': 'Ultra Music Festival', 'slug': 'ultra'},
]

CATEGORIES = [
    {'name': 'Artist Cards', 'slug': 'artist-cards'},
    {'name': 'Headliner Packs', 'slug': 'headliner-packs'},
    {'name': 'Venue Cards', 'slug': 'venue-cards'},
    {'name': 'Limited Edition', 'slug': 'limited-edition'},
    {'name': 'Holographic Special', 'slug': 'holographic-special'},
    {'name': 'Vintage Collection', 'slug': 'vintage-collection'},
]

COLLECTIONS = [
    {'name': 'Summer Festival 2025', 'slug': 'summer-2025'},
    {'name': 'Spring Lineup 2025', 'slug': 'spring-2025'},
    {'name': 'EDM Legends', 'slug': 'edm-legends'},
    {'name': 'Rock Heritage', 'slug': 'rock-heritage'},
    {'name': 'New Releases', 'slug': 'new-releases'},
]

PACK_TYPES = [
    {'name': 'Standard', 'slug': 'standard', 'card_count': 8, 'sort_order': 0},
    {'name': 'Deluxe', 'slug': 'deluxe', 'card_count': 15, 'sort_order': 1},
    {'name': 'Premium', 'slug': 'premium', 'card_count': 25, 'sort_order': 2},
]

BASE_PRICES = {
    'standard': Decimal('12.99'),
    'deluxe': Decimal('24.99'),
    'premium': Decimal('39.99'),
}

DEFAULT_PACK_TYPE = 'standard'

PRODUCT_TEMPLATES = [
    ('Coachella 2025 Artist Pack', 'coachella', 'artist-cards'),
    ('Lollapalooza Headliner Collection', 'lollapalooza', 'headliner-packs'),
    ('Bonnaroo Venue Memories', 'bonnaroo', 'venue-cards'),
    ('EDC Limited Edition Holographs', 'edc', 'limited-edition'),
    ('Burning Man Exclusive Series', 'burning-man', 'holographic-special'),
    ('Tomorrowland Main Stage Pack', 'tomorrowland', 'artist-cards'),
    ('Ultra 2025 DJ Legends', 'ultra', 'headliner-packs'),
    ('Coachella Vintage Collection', 'coachella', 'vintage-collection'),
    ('Lollapalooza Special Edition', 'lollapalooza', 'limited-edition'),
    ('Bonnaroo Artist Spotlight', 'bonnaroo', 'artist-cards'),
    ('EDC Holographic Deluxe', 'edc', 'holographic-special'),
    ('Burning Man Desert Dreams', 'burning-man', 'venue-cards'),
    ('Tomorrowland Heritage Pack', 'tomorrowland', 'vintage-collection'),
    ('Ultra Bass Legends', 'ultra', 'headliner-packs'),
    ('Coachella Indie Artist Pack', 'coachella', 'artist-cards'),
]

SOURCE_IMAGES = [f'pack-{n}.png' for n in range(1, 16)]

PACK_DIMENSIONS = {'length': 9, 'width': 6, 'height': 1}
MIN_PRICE = Decimal('5.99')
SALE_FACTOR = Decimal('0.85')
CENTS = Decimal('0.01')


def ensure_rows(model, rows):
    """Insert each row unless one with the same slug exists. Returns how many were created."""
    created = 0
    for row in rows:
        if model.objects.filter(slug=row['slug']).exists():
            continue
        instance = model(**row)
        instance.full_clean()
        instance.save()
        created += 1
    return created


def variant_pricing(rng, base_price):
    """
    (price, sale_price) for one variant.
    20% of variants get an integer jitter in [-2, 3]; 25% get 15% off.
    """
    jitter = rng.randint(-2, 3) if rng.random() < 0.2 else 0
    price = max(base_price + jitter, MIN_PRICE)
    sale_price = None
    if rng.random() < 0.25:
        sale_price = (price * SALE_FACTOR).quantize(CENTS, rounding=ROUND_HALF_UP)
    return price, sale_price


def build_sku(brand, pack_type, product):
    prefix = brand.slug.upper() if brand else 'RAVE'
    return f"{prefix}-{pack_type.slug.upper()}-{str(product.pk)[:8]}"


def copy_product_image(product, image_name, source_dir):
    """
    Copy one source image to MEDIA_ROOT/SEED_UPLOADS_SUBDIR and record it as
    the product's primary image. Copy failures are logged and skipped.
    """
    src = Path(source_dir) / image_name
    name = f"{settings.SEED_UPLOADS_SUBDIR}/{product.pk}-{Path(image_name).name}"
    dest = Path(settings.MEDIA_ROOT) / name

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
    except OSError as exc:
        logger.error('Failed to copy product image src=%s dest=%s: %s', src, dest, exc)
        return None

    image = ProductImage(
        product=product,
        image=name,
        sort_order=0,
        is_primary=True,
    )
    image.save()
    return image


def create_product(rng, template, brands, categories, pack_types, collections):
    name, brand_slug, category_slug = template
    brand = brands.get(brand_slug)
    category = categories.get(category_slug)

    festival = brand.name if brand else 'festival'
    product = Product(
        name=name,
        description=(
            f"Collectible trading card pack featuring exclusive {festival} festival content. "
            "Each pack contains rare artist cards, venue photography, and special edition memorabilia."
        ),
        category=category,
        brand=brand,
        is_published=True,
    )
    product.full_clean()
    product.save()

    variants = []
    for pack_type in pack_types:
        price, sale_price = variant_pricing(rng, BASE_PRICES[pack_type.slug])
        variant = ProductVariant(
            product=product,
            pack_type=pack_type,
            sku=build_sku(brand, pack_type, product),
            price=price,
            sale_price=sale_price,
            in_stock=rng.randint(10, 100),
            weight=(pack_type.card_count * Decimal('0.05') + Decimal('0.1')).quantize(CENTS),
            dimensions=dict(PACK_DIMENSIONS),
        )
        variant.full_clean()
        variant.save()
        variants.append(variant)

        if pack_type.slug == DEFAULT_PACK_TYPE:
            product.default_variant = variant

    if product.default_variant_id:
        product.save(update_fields=['default_variant', 'updated_at'])

    if collections:
        chosen = rng.sample(collections, rng.randint(1, min(3, len(collections))))
        for collection in chosen:
            ProductCollection.objects.create(product=product, collection=collection)

    return product, variants


def seed_products(rng, source_dir):
    brands = {b.slug: b for b in Brand.objects.all()}
    categories = {c.slug: c for c in Category.objects.all()}
    collections = list(Collection.objects.all())
    pack_types = list(PackType.objects.filter(slug__in=BASE_PRICES).order_by('sort_order'))

    products = []
    for index, template in enumerate(PRODUCT_TEMPLATES):
        product, variants = create_product(
            rng, template, brands, categories, pack_types, collections
        )
        copy_product_image(
            product,
            SOURCE_IMAGES[index % len(SOURCE_IMAGES)],
            source_dir,
        )
        logger.info('Seeded product %s with %d variants', product.name, len(variants))
        products.append(product)
    return products


def run_seed(rng=None, source_dir=None):
    """
    Seed the catalog. Returns a dict of created row counts.
    Exceptions propagate to the caller.
    """
    rng = rng or random.Random()
    source_dir = Path(source_dir or settings.SEED_IMAGES_DIR)

    logger.info('Seeding brands: Festival Organizers')
    brands = ensure_rows(Brand, BRANDS)

    logger.info('Seeding categories: Card Pack Types')
    categories = ensure_rows(Category, CATEGORIES)

    logger.info('Seeding collections: Festival Seasons')
    collections = ensure_rows(Collection, COLLECTIONS)

    logger.info('Seeding pack types')
    pack_types = ensure_rows(PackType, PACK_TYPES)

    logger.info('Creating trading card pack products with variants')
    products = seed_products(rng, source_dir)

    logger.info('Trading card pack seeding complete')
    return {
        'brands': brands,
        'categories': categories,
        'collections': collections,
        'pack_types': pack_types,
        'products': len(products),
        'variants': sum(p.variants.count() for p in products),
    }
