from django.conf import settings
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, render

from .filters import ProductFilter
from .models import Product


def home(request):
    """Landing page with the latest published packs."""
    latest = Product.objects.published().with_listing_data()[:settings.CATALOG_LATEST_COUNT]
    return render(request, 'catalog/home.html', {
        'products': latest,
    })


def product_list(request):
    """Filterable, paginated listing. The sidebar reads its state from the URL."""
    product_filter = ProductFilter(
        request.GET,
        queryset=Product.objects.published().with_listing_data(),
    )
    paginator = Paginator(product_filter.qs, settings.CATALOG_PAGE_SIZE)
    page_obj = paginator.get_page(request.GET.get('page'))

    return render(request, 'catalog/product_list.html', {
        'page_obj': page_obj,
        'products': page_obj.object_list,
        'total': paginator.count,
    })


def product_detail(request, pk):
    """
    Product page with a pack type picker.
    ?pack=<slug> selects a tier; otherwise the default variant is shown.
    """
    product = get_object_or_404(
        Product.objects.published().with_listing_data(),
        pk=pk,
    )
    variants = list(product.variants.all())

    selected = None
    pack_slug = request.GET.get('pack')
    if pack_slug:
        selected = next((v for v in variants if v.pack_type.slug == pack_slug), None)
    if selected is None:
        selected = product.default_variant or (variants[0] if variants else None)

    return render(request, 'catalog/product_detail.html', {
        'product': product,
        'variants': variants,
        'selected_variant': selected,
        'collections': product.collections.all(),
    })
