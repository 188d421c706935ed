from django.db import models
from django.utils.text import slugify

from apps.catalog.validators import slug_validator


class Brand(models.Model):
    """
    Festival organiser whose line-up a pack is built around.
    Exposed to shoppers as the "festival" facet.
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
    logo_url = models.URLField(
        blank=True,
        verbose_name='Logo URL'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Brand'
        verbose_name_plural = 'Brands'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)
