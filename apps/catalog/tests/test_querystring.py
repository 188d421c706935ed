from urllib.parse import parse_qsl, urlsplit

from apps.catalog.facets import RESET_KEYS
from apps.catalog.querystring import get_array_param, remove_params, toggle_array_param


def query_pairs(url):
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


class TestGetArrayParam:

    def test_absent_key_is_empty(self):
        assert get_array_param('?sort=new', 'festival') == []
        assert get_array_param('', 'festival') == []

    def test_repeated_keys(self):
        assert get_array_param('?festival=edc&festival=ultra', 'festival') == ['edc', 'ultra']

    def test_comma_delimited(self):
        assert get_array_param('festival=edc,ultra', 'festival') == ['edc', 'ultra']

    def test_mixed_forms_deduplicate_in_order(self):
        search = '?festival=ultra,edc&festival=edc&festival=,coachella,'
        assert get_array_param(search, 'festival') == ['ultra', 'edc', 'coachella']

    def test_malformed_input_is_empty(self):
        assert get_array_param('%%%&&==', 'festival') == []
        assert get_array_param('?festival=', 'festival') == []


class TestToggleArrayParam:

    def test_adds_missing_value(self):
        url = toggle_array_param('/products/', '?sort=new', 'festival', 'edc')
        assert url == '/products/?sort=new&festival=edc'

    def test_removes_present_value(self):
        url = toggle_array_param('/products/', '?festival=edc&festival=ultra', 'festival', 'edc')
        assert url == '/products/?festival=ultra'

    def test_key_keeps_its_position(self):
        url = toggle_array_param('/products/', '?sort=new&festival=edc&page=2', 'festival', 'ultra')
        assert url == '/products/?sort=new&festival=edc&festival=ultra&page=2'

    def test_last_value_drops_the_key(self):
        assert toggle_array_param('/products/', '?festival=edc', 'festival', 'edc') == '/products/'

    def test_comma_values_are_written_as_repeated_keys(self):
        url = toggle_array_param('/products/', '?festival=edc,ultra', 'festival', 'coachella')
        assert query_pairs(url) == [
            ('festival', 'edc'), ('festival', 'ultra'), ('festival', 'coachella'),
        ]

    def test_round_trip_restores_parameter_set(self):
        search = '?sort=new&festival=edc&price=0-15&page=2'
        once = toggle_array_param('/products/', search, 'festival', 'ultra')
        twice = toggle_array_param('/products/', urlsplit(once).query, 'festival', 'ultra')

        assert ('festival', 'ultra') in query_pairs(once)
        assert query_pairs(twice) == parse_qsl(search.lstrip('?'))
        assert twice == '/products/' + search

    def test_blank_value_is_treated_as_absent(self):
        added = toggle_array_param('/products/', '?festival=&sort=new', 'festival', 'edc')
        assert added == '/products/?festival=edc&sort=new'

        removed = toggle_array_param('/products/', urlsplit(added).query, 'festival', 'edc')
        assert removed == '/products/?sort=new'

    def test_other_keys_untouched(self):
        url = toggle_array_param('/products/', '?q=holo+pack&category=venue-cards', 'packType', 'deluxe')
        pairs = query_pairs(url)
        assert ('q', 'holo pack') in pairs
        assert ('category', 'venue-cards') in pairs
        assert ('packType', 'deluxe') in pairs


class TestRemoveParams:

    def test_clear_all_filters_keeps_unrelated_params(self):
        search = '?festival=edc&category=venue-cards&packType=deluxe&price=0-15&page=3&sort=new'
        assert remove_params('/products/', search, RESET_KEYS) == '/products/?sort=new'

    def test_nothing_left_returns_path(self):
        assert remove_params('/products/', '?festival=edc&page=2', RESET_KEYS) == '/products/'

    def test_unknown_keys_are_ignored(self):
        assert remove_params('/products/', '?sort=new', ['festival']) == '/products/?sort=new'
