import django_filters
from django.db.models import F, Q
from django.http import QueryDict

from apps.catalog.facets import (
    CATEGORIES,
    FACET_CHOICES,
    FESTIVALS,
    PACK_TYPES,
    PRICES,
    price_bounds,
)
from apps.catalog.models import Product
from apps.catalog.querystring import get_array_param


def _choices(values):
    return [(v, v) for v in values]


def _as_querydict(data):
    if isinstance(data, QueryDict):
        return data.copy()
    querydict = QueryDict(mutable=True)
    for key, value in data.items():
        querydict.setlist(key, list(value) if isinstance(value, (list, tuple)) else [value])
    return querydict


class ProductFilter(django_filters.FilterSet):
    """
    Storefront facets: ?festival=edc&category=venue-cards&packType=deluxe&price=15-30

    Each facet accepts repeated keys or comma-delimited values. Values outside
    a facet's choices are dropped before validation so they act as absent.
    """

    festival = django_filters.MultipleChoiceFilter(
        field_name='brand__slug',
        choices=_choices(FESTIVALS),
    )
    category = django_filters.MultipleChoiceFilter(
        field_name='category__slug',
        choices=_choices(CATEGORIES),
    )
    packType = django_filters.MultipleChoiceFilter(
        choices=_choices(PACK_TYPES),
        method='filter_variants',
    )
    price = django_filters.MultipleChoiceFilter(
        choices=_choices(PRICES),
        method='filter_variants',
    )

    class Meta:
        model = Product
        fields = ['festival', 'category', 'packType', 'price']

    def __init__(self, data=None, *args, **kwargs):
        if data is not None:
            data = self.normalize(data)
        super().__init__(data, *args, **kwargs)

    @staticmethod
    def normalize(data):
        data = _as_querydict(data)
        search = data.urlencode()
        for key, choices in FACET_CHOICES.items():
            if key in data:
                data.setlist(key, [v for v in get_array_param(search, key) if v in choices])
        return data

    def filter_variants(self, queryset, name, value):
        # packType and price are applied together in filter_queryset()
        return queryset

    def filter_queryset(self, queryset):
        """
        packType and price must hold for the same variant, so
        ?packType=standard&price=30-50 means "a Standard pack in $30-50".
        """
        queryset = super().filter_queryset(queryset)
        condition = self.variant_condition(
            self.form.cleaned_data.get('packType'),
            self.form.cleaned_data.get('price'),
        )
        if condition is None:
            return queryset
        return queryset.filter(condition).distinct()

    @classmethod
    def variant_condition(cls, pack_types, buckets):
        """Q over one variant join, or None when neither facet is selected."""
        if not pack_types and not buckets:
            return None

        condition = Q()
        if pack_types:
            condition &= Q(variants__pack_type__slug__in=pack_types)
        if buckets:
            condition &= cls.price_condition(buckets)
        return condition

    @classmethod
    def price_condition(cls, buckets):
        """A variant whose selling price is in one of the buckets."""
        on_sale = Q(variants__sale_price__isnull=False, variants__sale_price__lt=F('variants__price'))
        full_price = Q(variants__sale_price__isnull=True) | Q(variants__sale_price__gte=F('variants__price'))

        condition = Q()
        for bucket in buckets:
            low, high = price_bounds(bucket)
            condition |= on_sale & cls._bucket_q('variants__sale_price', low, high)
            condition |= full_price & cls._bucket_q('variants__price', low, high)
        return condition

    @staticmethod
    def _bucket_q(field, low, high):
        q = Q(**{f'{field}__gte': low})
        if high is not None:
            q &= Q(**{f'{field}__lt': high})
        return q
