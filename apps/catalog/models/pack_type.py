from django.core.validators import MinValueValidator
from django.db import models
from django.utils.text import slugify

from apps.catalog.validators import slug_validator


class PackType(models.Model):
    """
    Catalog tier of a card pack.
    Examples: Standard (8 cards), Deluxe (15 cards), Premium (25 cards)
    """
    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        validators=[slug_validator],
        verbose_name='Slug'
    )
    card_count = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        verbose_name='Cards per pack'
    )
    sort_order = models.IntegerField(
        default=0,
        verbose_name='Sort order'
    )

    class Meta:
        ordering = ['sort_order', 'name']
        verbose_name = 'Pack type'
        verbose_name_plural = 'Pack types'

    def __str__(self):
        return f"{self.name} ({self.card_count} cards)"

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)
