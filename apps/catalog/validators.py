from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, RegexValidator

DIMENSION_KEYS = ('length', 'width', 'height')

non_negative_price = MinValueValidator(
    Decimal('0.00'),
    message='Price cannot be negative'
)

slug_validator = RegexValidator(
    regex=r'^[a-z0-9]+(?:-[a-z0-9]+)*$',
    message='Slug must be lowercase letters, digits and single hyphens'
)


def validate_positive(value):
    if value is not None and value <= 0:
        raise ValidationError('%(value)s must be greater than zero', params={'value': value})


def validate_dimensions(value):
    """
    Physical pack dimensions: {"length": 9, "width": 6, "height": 1}.
    All three keys are required and must be positive numbers.
    """
    if value is None:
        return
    if not isinstance(value, dict):
        raise ValidationError('Dimensions must be an object with length, width and height')

    missing = [key for key in DIMENSION_KEYS if key not in value]
    if missing:
        raise ValidationError(
            'Missing dimension(s): %(keys)s',
            params={'keys': ', '.join(missing)}
        )

    extra = sorted(set(value) - set(DIMENSION_KEYS))
    if extra:
        raise ValidationError(
            'Unknown dimension(s): %(keys)s',
            params={'keys': ', '.join(extra)}
        )

    for key in DIMENSION_KEYS:
        number = value[key]
        # bool is an int subclass
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            raise ValidationError('%(key)s must be a number', params={'key': key})
        if number <= 0:
            raise ValidationError('%(key)s must be greater than zero', params={'key': key})
