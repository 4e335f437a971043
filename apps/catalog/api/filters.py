from django_filters import rest_framework as filters
from apps.catalog.models import Product, Variant
from apps.catalog.services.variant_navigation import VariantNavigationService


def parse_attribute_filters(values):
    """
    Turn ['color:Silver', 'storage:512GB'] into {'color': 'Silver', 'storage': '512GB'}.
    Entries without a colon are ignored.
    """
    selections = {}
    for value in values:
        if ':' not in value:
            continue
        attr_slug, option_value = value.split(':', 1)
        if attr_slug and option_value:
            selections[attr_slug] = option_value
    return selections


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for dynamic attributes."""

    product = filters.CharFilter(field_name='product__slug')
    product_id = filters.NumberFilter(field_name='product__id')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Attribute filters, repeatable
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = Variant
        fields = ['product', 'product_id', 'is_active', 'sku']

    def filter_in_stock(self, queryset, name, value):
        if value is True:
            return queryset.filter(stock_quantity__gt=0) | queryset.filter(
                track_inventory=False
            ) | queryset.filter(allow_backorder=True)
        elif value is False:
            return queryset.filter(
                stock_quantity__lte=0,
                track_inventory=True,
                allow_backorder=False
            )
        return queryset

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute_slug:option_value
        Example: ?product=macbook-pro&attribute=color:Silver&attribute=storage:512GB

        With a product the combination matrix answers; without one each pair
        is applied as a plain join.
        """
        selections = parse_attribute_filters(self.data.getlist(name))
        if not selections:
            return queryset

        product = None
        product_slug = self.data.get('product')
        if product_slug:
            product = Product.objects.filter(slug=product_slug).first()

        if product is not None:
            variant_ids = VariantNavigationService.find_matching_variants(
                product, selections
            )
            return queryset.filter(pk__in=variant_ids)

        for attr_slug, option_value in selections.items():
            queryset = queryset.filter(
                variantattribute__attribute_option__attribute_type__slug=attr_slug,
                variantattribute__attribute_option__value=option_value
            )
        return queryset.distinct()
