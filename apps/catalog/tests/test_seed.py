import logging
import random
from decimal import Decimal
from io import StringIO
from pathlib import Path

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.catalog import seed
from apps.catalog.models import (
    Brand,
    Category,
    Collection,
    PackType,
    Product,
    ProductImage,
    ProductVariant,
)

PNG = (
    b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00'
    b'\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18\xd8N\x00'
    b'\x00\x00\x00IEND\xaeB`\x82'
)


@pytest.fixture
def source_dir(tmp_path):
    path = tmp_path / 'source'
    path.mkdir()
    for name in seed.SOURCE_IMAGES:
        (path / name).write_bytes(PNG)
    return path


@pytest.fixture
def seeded(db, source_dir):
    return seed.run_seed(rng=random.Random(7), source_dir=source_dir)


@pytest.mark.django_db
class TestRunSeed:

    def test_summary(self, seeded):
        assert seeded == {
            'brands': 7,
            'categories': 6,
            'collections': 5,
            'pack_types': 3,
            'products': 15,
            'variants': 45,
        }

    def test_reference_rows_never_duplicate(self, seeded, source_dir):
        again = seed.run_seed(rng=random.Random(8), source_dir=source_dir)

        assert again['brands'] == again['categories'] == again['collections'] == again['pack_types'] == 0
        assert Brand.objects.count() == 7
        assert Category.objects.count() == 6
        assert Collection.objects.count() == 5
        assert PackType.objects.count() == 3
        assert Product.objects.count() == 30

    def test_skus_are_unique(self, seeded, source_dir):
        seed.run_seed(rng=random.Random(8), source_dir=source_dir)
        skus = list(ProductVariant.objects.values_list('sku', flat=True))
        assert len(skus) == len(set(skus)) == 90

    def test_sku_format(self, seeded):
        variant = ProductVariant.objects.select_related('product', 'pack_type').filter(
            product__brand__slug='edc', pack_type__slug='deluxe'
        ).first()
        assert variant.sku == f"EDC-DELUXE-{str(variant.product.pk)[:8]}"

    def test_every_product_has_one_variant_per_pack_type(self, seeded):
        for product in Product.objects.prefetch_related('variants__pack_type'):
            assert sorted(v.pack_type.slug for v in product.variants.all()) == ['deluxe', 'premium', 'standard']
            assert product.default_variant.pack_type.slug == 'standard'
            assert product.is_published

    def test_collections_per_product(self, seeded):
        for product in Product.objects.all():
            assert 1 <= product.collections.count() <= 3

    def test_pricing_rules(self, seeded):
        for variant in ProductVariant.objects.all():
            assert variant.price >= seed.MIN_PRICE
            assert variant.price == variant.price.quantize(Decimal('0.01'))
            if variant.sale_price is not None:
                expected = (variant.price * seed.SALE_FACTOR).quantize(Decimal('0.01'))
                assert variant.sale_price == expected
                assert variant.sale_price < variant.price
            assert variant.dimensions == {'length': 9, 'width': 6, 'height': 1}

    def test_images_are_copied(self, seeded, media_root):
        images = ProductImage.objects.select_related('product')
        assert images.count() == 15
        for image in images:
            assert image.is_primary
            assert image.image.name.startswith('uploads/trading-cards/')
            assert (media_root / image.image.name).exists()

    def test_image_rows_resolve_under_media_root(self, db, source_dir, settings, tmp_path):
        settings.MEDIA_ROOT = tmp_path / 'elsewhere'
        seed.run_seed(rng=random.Random(2), source_dir=source_dir)

        images = ProductImage.objects.all()
        assert images.count() == 15
        for image in images:
            path = Path(image.image.path)
            assert path.is_file()
            assert path.is_relative_to(tmp_path / 'elsewhere' / 'uploads' / 'trading-cards')

    def test_missing_images_are_logged_not_fatal(self, db, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger='apps.catalog.seed'):
            summary = seed.run_seed(rng=random.Random(1), source_dir=tmp_path / 'missing')

        assert summary['products'] == 15
        assert ProductImage.objects.count() == 0
        assert 'Failed to copy product image' in caplog.text

    def test_failure_keeps_rows_created_so_far(self, db, source_dir, monkeypatch):
        original = seed.create_product
        calls = {'n': 0}

        def flaky(*args, **kwargs):
            calls['n'] += 1
            if calls['n'] > 2:
                raise RuntimeError('database went away')
            return original(*args, **kwargs)

        monkeypatch.setattr(seed, 'create_product', flaky)
        with pytest.raises(RuntimeError):
            seed.run_seed(rng=random.Random(1), source_dir=source_dir)

        assert Product.objects.count() == 2
        assert Brand.objects.count() == 7


class TestVariantPricing:

    def test_floor(self):
        class Low(random.Random):
            def random(self):
                return 0.0

            def randint(self, a, b):
                return a

        price, sale_price = seed.variant_pricing(Low(), Decimal('6.99'))
        assert price == seed.MIN_PRICE
        assert sale_price == Decimal('5.09')

    def test_no_jitter_no_sale(self):
        class High(random.Random):
            def random(self):
                return 0.99

        assert seed.variant_pricing(High(), Decimal('12.99')) == (Decimal('12.99'), None)


@pytest.mark.django_db
class TestSeedCommand:

    def test_success_message(self, source_dir):
        out = StringIO()
        call_command('seed_catalog', '--random-seed', '3', '--images-dir', str(source_dir), stdout=out)

        assert 'Sample catalog created successfully!' in out.getvalue()
        assert '15 products' in out.getvalue()

    def test_failure_raises_command_error(self, monkeypatch, caplog):
        def boom(**kwargs):
            raise RuntimeError('disk full')

        monkeypatch.setattr('apps.catalog.management.commands.seed_catalog.run_seed', boom)
        with pytest.raises(CommandError, match='disk full'):
            call_command('seed_catalog', stdout=StringIO())
        assert 'Seeding failed' in caplog.text
