from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify

from apps.catalog.validators import slug_validator


class Category(models.Model):
    """
    Kind of card pack.
    Examples: Artist Cards, Headliner Packs, Holographic Special
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
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent category'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.full_path

    @property
    def full_path(self):
        """Returns the full category path: Parent > Child > Grandchild"""
        path = [a.name for a in self.get_ancestors()] + [self.name]
        return ' > '.join(path)

    def get_ancestors(self):
        """Returns list of all ancestor categories, from root to immediate parent."""
        ancestors = []
        seen = {self.pk}
        current = self.parent
        # Stops at a repeat so a corrupted tree cannot loop forever
        while current and current.pk not in seen:
            seen.add(current.pk)
            ancestors.insert(0, current)
            current = current.parent
        return ancestors

    def clean(self):
        super().clean()
        if self.pk is None:
            return
        seen = set()
        current = self.parent
        while current and current.pk not in seen:
            if current.pk == self.pk:
                raise ValidationError({'parent': 'A category cannot be its own ancestor.'})
            seen.add(current.pk)
            current = current.parent

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)
