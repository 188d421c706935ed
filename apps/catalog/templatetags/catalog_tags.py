from decimal import Decimal

from django import template

from apps.catalog import facets
from apps.catalog.querystring import toggle_array_param

register = template.Library()


def _current_url(context):
    request = context['request']
    return request.path, request.GET.urlencode()


@register.filter
def format_label(value):
    return facets.format_label(str(value))


@register.filter
def money(value):
    if value is None or value == '':
        return ''
    return f"${Decimal(value):,.2f}"


@register.simple_tag(takes_context=True)
def toggle_url(context, key, value):
    """{% toggle_url 'festival' 'edc' %} -> current URL with edc toggled."""
    path, search = _current_url(context)
    return toggle_array_param(path, search, key, value)


@register.simple_tag(takes_context=True)
def page_url(context, number):
    """Current URL with only the page number replaced."""
    query = context['request'].GET.copy()
    query['page'] = number
    return f"?{query.urlencode()}"


@register.inclusion_tag('catalog/includes/filters.html', takes_context=True)
def catalog_filters(context):
    path, search = _current_url(context)
    return {
        'groups': facets.build_filter_groups(path, search),
        'mobile_groups': facets.build_filter_groups(path, search, id_prefix='m-'),
        'clear_url': facets.clear_filters_url(path, search),
        'has_active': facets.has_active_filters(search),
    }


@register.inclusion_tag('catalog/includes/product_card.html')
def product_card(product):
    variant_count = product.variant_count
    return {
        'product': product,
        'title': product.name,
        'subtitle': product.category.name if product.category else '',
        'meta': f"{variant_count} Pack Type{'' if variant_count == 1 else 's'}",
        'price': product.display_price,
        'image_url': product.get_thumbnail_url(),
        'badge': product.badge,
    }
