from django.db import models
from django.utils.text import slugify

from apps.catalog.validators import slug_validator


class Collection(models.Model):
    """
    Seasonal or themed grouping of products.
    Example: "Summer Festival 2025", "EDM Legends"
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=200,
        unique=True,
        validators=[slug_validator],
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'Collection'
        verbose_name_plural = 'Collections'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class ProductCollection(models.Model):
    """Through model linking a Product to the Collections it belongs to."""
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='collection_memberships',
        verbose_name='Product'
    )
    collection = models.ForeignKey(
        Collection,
        on_delete=models.CASCADE,
        related_name='memberships',
        verbose_name='Collection'
    )

    class Meta:
        unique_together = ['product', 'collection']
        verbose_name = 'Product collection'
        verbose_name_plural = 'Product collections'

    def __str__(self):
        return f"{self.product} in {self.collection}"
