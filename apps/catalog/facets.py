"""
Filter sidebar state.

The sidebar shows one checkbox group per facet. Everything it renders is
derived from the current URL: which boxes are checked, how many are active
per group, and the URL each box navigates to when clicked.
"""

from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from .querystring import get_array_param, remove_params, toggle_array_param

FESTIVALS = (
    'coachella',
    'lollapalooza',
    'bonnaroo',
    'edc',
    'burning-man',
    'tomorrowland',
    'ultra',
)

CATEGORIES = (
    'artist-cards',
    'headliner-packs',
    'venue-cards',
    'limited-edition',
    'holographic-special',
    'vintage-collection',
)

PACK_TYPES = ('standard', 'deluxe', 'premium')

# id -> (label, lower bound inclusive, upper bound exclusive or None)
PRICES = {
    '0-15': ('$0 - $15', Decimal('0'), Decimal('15')),
    '15-30': ('$15 - $30', Decimal('15'), Decimal('30')),
    '30-50': ('$30 - $50', Decimal('30'), Decimal('50')),
    '50-': ('Over $50', Decimal('50'), None),
}

FILTER_KEYS = ('festival', 'category', 'packType', 'price')
RESET_KEYS = FILTER_KEYS + ('page',)

FACET_CHOICES = {
    'festival': FESTIVALS,
    'category': CATEGORIES,
    'packType': PACK_TYPES,
    'price': tuple(PRICES),
}

GROUP_TITLES = {
    'festival': 'Festival',
    'category': 'Category',
    'packType': 'Pack Type',
    'price': 'Price',
}


def format_label(value: str) -> str:
    """'burning-man' -> 'Burning Man'"""
    return ' '.join(word[:1].upper() + word[1:] for word in value.split('-'))


def option_label(key: str, value: str) -> str:
    if key == 'price':
        return PRICES[value][0]
    return format_label(value)


def price_bounds(bucket: str) -> Optional[Tuple[Decimal, Optional[Decimal]]]:
    if bucket not in PRICES:
        return None
    _, low, high = PRICES[bucket]
    return low, high


def selected_values(search: str, key: str) -> List[str]:
    """Selected values of a facet, ignoring anything outside its choices."""
    choices = FACET_CHOICES[key]
    return [v for v in get_array_param(search, key) if v in choices]


def build_filter_groups(pathname: str, search: str, id_prefix: str = '') -> List[Dict]:
    """
    One dict per facet for the sidebar template:

        {'key': 'festival', 'title': 'Festival', 'active_count': 1,
         'options': [{'value': 'edc', 'label': 'Edc', 'checked': True,
                      'url': '/products/?sort=new', 'input_id': 'festival-edc'}, ...]}
    """
    groups = []
    for key in FILTER_KEYS:
        selected = selected_values(search, key)
        options = []
        for value in FACET_CHOICES[key]:
            options.append({
                'value': value,
                'label': option_label(key, value),
                'checked': value in selected,
                'url': toggle_array_param(pathname, search, key, value),
                'input_id': f"{id_prefix}{key}-{value}",
            })
        groups.append({
            'key': key,
            'title': GROUP_TITLES[key],
            'active_count': len(selected),
            'options': options,
        })
    return groups


def clear_filters_url(pathname: str, search: str) -> str:
    return remove_params(pathname, search, RESET_KEYS)


def has_active_filters(search: str) -> bool:
    return any(selected_values(search, key) for key in FILTER_KEYS)
