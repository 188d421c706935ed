import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.db.models import Prefetch
from django.urls import reverse
from django.utils import timezone
from simple_history.models import HistoricalRecords
from imagekit.models import ImageSpecField
from imagekit.processors import ResizeToFill


class ProductQuerySet(models.QuerySet):

    def published(self):
        return self.filter(is_published=True)

    def with_listing_data(self):
        """Everything a product card needs, in a fixed number of queries."""
        from .variant import ProductVariant

        return self.select_related(
            'brand', 'category', 'default_variant__pack_type'
        ).prefetch_related(
            Prefetch(
                'variants',
                queryset=ProductVariant.objects.select_related('pack_type')
            ),
            'images',
        )


class Product(models.Model):
    """
    A card pack line, e.g. "Coachella 2025 Artist Pack".
    The purchasable tiers live in its variants; the default variant drives
    the price shown on product cards.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Name'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    category = models.ForeignKey(
        'catalog.Category',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    brand = models.ForeignKey(
        'catalog.Brand',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Brand'
    )
    collections = models.ManyToManyField(
        'catalog.Collection',
        through='catalog.ProductCollection',
        blank=True,
        related_name='products',
        verbose_name='Collections'
    )
    is_published = models.BooleanField(
        default=False,
        verbose_name='Published'
    )
    default_variant = models.ForeignKey(
        'catalog.ProductVariant',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name='Default variant'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    history = HistoricalRecords()

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at', 'name']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('catalog:product_detail', args=[self.pk])

    @property
    def variant_count(self):
        return len(self.variants.all())

    @property
    def display_price(self):
        """Price of the default variant, falling back to the cheapest one."""
        if self.default_variant is not None:
            return self.default_variant.effective_price
        prices = [v.effective_price for v in self.variants.all()]
        return min(prices) if prices else None

    @property
    def is_on_sale(self):
        return any(v.is_on_sale for v in self.variants.all())

    @property
    def primary_image(self):
        images = list(self.images.all())
        for image in images:
            if image.is_primary:
                return image
        return images[0] if images else None

    def get_thumbnail_url(self):
        image = self.primary_image
        if not image:
            return None
        try:
            return image.thumbnail.url
        except Exception:
            return image.image.url

    @property
    def badge(self):
        """Card ribbon as (label, tone), or None."""
        if self.is_on_sale:
            return ('Sale', 'red')
        if self.created_at and self.created_at >= timezone.now() - timedelta(days=settings.CATALOG_NEW_BADGE_DAYS):
            return ('New', 'orange')
        return None


class ProductImage(models.Model):
    """Product photography, with a thumbnail generated on first access."""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name='Product'
    )
    image = models.ImageField(
        upload_to='uploads/trading-cards/',
        max_length=255,
        verbose_name='Image'
    )
    thumbnail = ImageSpecField(
        source='image',
        processors=[ResizeToFill(400, 400)],
        format='JPEG',
        options={'quality': 80}
    )
    alt_text = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Alt text'
    )
    sort_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Sort order'
    )
    is_primary = models.BooleanField(
        default=False,
        verbose_name='Primary image'
    )

    class Meta:
        ordering = ['sort_order']
        verbose_name = 'Product image'
        verbose_name_plural = 'Product images'

    def __str__(self):
        return f"{self.product.name} - image {self.sort_order}"

    def save(self, *args, **kwargs):
        # Only one primary image per product
        if self.is_primary:
            ProductImage.objects.filter(
                product=self.product,
                is_primary=True
            ).exclude(pk=self.pk).update(is_primary=False)

        if not self.alt_text:
            self.alt_text = self.product.name

        super().save(*args, **kwargs)
