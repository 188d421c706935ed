from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from apps.catalog.models import Brand, Category, PackType, Product, ProductImage, ProductVariant
from apps.catalog.validators import validate_dimensions


class TestValidateDimensions:

    def test_accepts_positive_numbers(self):
        validate_dimensions({'length': 9, 'width': 6.5, 'height': 1})

    @pytest.mark.parametrize('value', [
        {'length': 9, 'width': 6},
        {'length': 9, 'width': 6, 'height': 1, 'depth': 2},
        {'length': 0, 'width': 6, 'height': 1},
        {'length': True, 'width': 6, 'height': 1},
        {'length': '9', 'width': 6, 'height': 1},
        [9, 6, 1],
    ])
    def test_rejects_bad_shapes(self, value):
        with pytest.raises(ValidationError):
            validate_dimensions(value)


@pytest.mark.django_db
class TestReferenceRows:

    def test_slug_is_derived_from_name(self):
        brand = Brand.objects.create(name='Burning Man')
        assert brand.slug == 'burning-man'

    def test_category_path(self):
        parent = Category.objects.create(name='Artist Cards')
        child = Category.objects.create(name='Headliners', parent=parent)
        assert child.full_path == 'Artist Cards > Headliners'

    def test_category_cannot_be_its_own_parent(self):
        category = Category.objects.create(name='Artist Cards')
        category.parent = category
        with pytest.raises(ValidationError) as exc:
            category.full_clean()
        assert 'parent' in exc.value.message_dict

    def test_category_cycle_is_rejected(self):
        root = Category.objects.create(name='Artist Cards')
        child = Category.objects.create(name='Headliners', parent=root)
        root.parent = child
        with pytest.raises(ValidationError):
            root.full_clean()

    def test_ancestors_stop_at_a_stored_cycle(self):
        root = Category.objects.create(name='Artist Cards')
        child = Category.objects.create(name='Headliners', parent=root)
        Category.objects.filter(pk=root.pk).update(parent=child)

        child.refresh_from_db()
        assert child.full_path == 'Artist Cards > Headliners'
        assert str(child) == 'Artist Cards > Headliners'

    def test_pack_type_needs_at_least_one_card(self):
        with pytest.raises(ValidationError):
            PackType(name='Empty', slug='empty', card_count=0).full_clean()

    def test_pack_type_str(self, pack_types):
        assert str(pack_types['deluxe']) == 'Deluxe (15 cards)'


@pytest.mark.django_db
class TestVariant:

    def test_sku_is_unique(self, make_product, pack_types):
        product = make_product('Coachella Artist Pack')
        sku = product.variants.get().sku

        with pytest.raises(IntegrityError), transaction.atomic():
            ProductVariant.objects.create(
                product=product, pack_type=pack_types['deluxe'], sku=sku, price=Decimal('24.99'),
            )

    def test_negative_price_is_rejected(self, make_product, pack_types):
        product = make_product('Coachella Artist Pack')
        variant = ProductVariant(
            product=product, pack_type=pack_types['deluxe'], sku='NEG-1', price=Decimal('-1.00'),
        )
        with pytest.raises(ValidationError) as exc:
            variant.full_clean()
        assert 'price' in exc.value.message_dict

    def test_price_has_at_most_two_decimals(self, make_product, pack_types):
        product = make_product('Coachella Artist Pack')
        variant = ProductVariant(
            product=product, pack_type=pack_types['deluxe'], sku='DEC-1', price=Decimal('1.999'),
        )
        with pytest.raises(ValidationError):
            variant.full_clean()

    def test_bad_dimensions_fail_full_clean(self, make_product, pack_types):
        product = make_product('Coachella Artist Pack')
        variant = ProductVariant(
            product=product, pack_type=pack_types['deluxe'], sku='DIM-1',
            price=Decimal('24.99'), dimensions={'length': 9},
        )
        with pytest.raises(ValidationError) as exc:
            variant.full_clean()
        assert 'dimensions' in exc.value.message_dict

    def test_sale_pricing(self, make_product):
        product = make_product('EDC Pack', variants={'standard': ('20.00', '15.00')})
        variant = product.variants.get()

        assert variant.is_on_sale
        assert variant.effective_price == Decimal('15.00')
        assert variant.discount_percentage == 25
        assert variant.card_price == Decimal('1.88')

    def test_sale_price_above_price_is_ignored(self, make_product):
        product = make_product('EDC Pack', variants={'standard': ('20.00', '25.00')})
        variant = product.variants.get()

        assert not variant.is_on_sale
        assert variant.effective_price == Decimal('20.00')
        assert variant.discount_percentage == 0

    def test_history_is_recorded(self, make_product):
        variant = make_product('EDC Pack').variants.get()
        variant.price = Decimal('10.00')
        variant.save()
        assert variant.history.count() == 2


@pytest.mark.django_db
class TestProduct:

    def test_display_price_uses_default_variant(self, make_product):
        product = make_product('Pack', variants={
            'deluxe': ('24.99', None),
            'standard': ('12.99', None),
        })
        assert product.default_variant.pack_type.slug == 'deluxe'
        assert product.display_price == Decimal('24.99')

    def test_display_price_falls_back_to_cheapest(self, make_product):
        product = make_product('Pack', variants={
            'standard': ('12.99', '9.99'),
            'premium': ('39.99', None),
        })
        product.default_variant = None
        product.save()
        assert product.display_price == Decimal('9.99')

    def test_badge(self, make_product):
        assert make_product('Sale Pack', variants={'standard': ('20.00', '15.00')}).badge == ('Sale', 'red')
        assert make_product('Fresh Pack').badge == ('New', 'orange')

    def test_single_primary_image(self, make_product):
        product = make_product('Pack')
        first = ProductImage.objects.create(product=product, image='uploads/trading-cards/a.png', is_primary=True)
        second = ProductImage.objects.create(product=product, image='uploads/trading-cards/b.png', is_primary=True)

        first.refresh_from_db()
        assert not first.is_primary
        assert product.primary_image == second
        assert second.alt_text == 'Pack'

    def test_published_queryset(self, make_product):
        make_product('Live')
        make_product('Draft', published=False)
        assert [p.name for p in Product.objects.published()] == ['Live']
