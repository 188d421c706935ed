import uuid
from decimal import Decimal

from django.db import models
from simple_history.models import HistoricalRecords

from apps.catalog.validators import non_negative_price, validate_dimensions, validate_positive


class ProductVariant(models.Model):
    """
    A purchasable pack tier of a product with its own SKU, price and stock.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Product'
    )
    pack_type = models.ForeignKey(
        'catalog.PackType',
        on_delete=models.PROTECT,
        related_name='variants',
        verbose_name='Pack type'
    )
    sku = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='SKU'
    )

    # Pricing
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[non_negative_price],
        verbose_name='Price'
    )
    sale_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[non_negative_price],
        verbose_name='Sale price'
    )

    # Inventory
    in_stock = models.PositiveIntegerField(
        default=0,
        verbose_name='Units in stock'
    )

    # Physical properties (optional)
    weight = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[validate_positive],
        verbose_name='Weight (kg)'
    )
    dimensions = models.JSONField(
        null=True,
        blank=True,
        validators=[validate_dimensions],
        verbose_name='Dimensions (cm)',
        help_text='{"length": 9, "width": 6, "height": 1}'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'pack_type__sort_order', 'sku']
        verbose_name = 'Variant'
        verbose_name_plural = 'Variants'

    def __str__(self):
        return self.sku

    @property
    def is_on_sale(self):
        return self.sale_price is not None and self.sale_price < self.price

    @property
    def effective_price(self):
        return self.sale_price if self.is_on_sale else self.price

    @property
    def discount_percentage(self):
        if not self.is_on_sale or not self.price:
            return 0
        return int(((self.price - self.sale_price) / self.price) * 100)

    @property
    def is_in_stock(self):
        return self.in_stock > 0

    @property
    def card_price(self):
        """Price per card, useful for comparing tiers."""
        return (self.effective_price / self.pack_type.card_count).quantize(Decimal('0.01'))
