from rest_framework import viewsets, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db.models import Prefetch

from apps.catalog.models import Product, Variant, VariantAttribute
from apps.catalog.services.variant_navigation import VariantNavigationService
from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    SelectionRequestSerializer,
    VariantListSerializer,
)
from .filters import VariantFilter


def selections_from_query(query_params, domain):
    """
    Build attribute selections from query params (?color=Silver&storage=512GB).

    Only params naming one of the product's attributes count, so tracking
    or paging params (utm_source, format, ...) never become selections.
    """
    return {
        k: v for k, v in query_params.items()
        if k in domain and v
    }


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for products and their option selection.

    list: List active products
    retrieve: Product detail with attribute domain
    availability: Availability of every option for a selection
    select: Reconcile a selection after the user picked an option
    resolve: Variants matching a selection
    """
    queryset = Product.objects.filter(is_active=True)
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductListSerializer

    def retrieve(self, request, *args, **kwargs):
        product = self.get_object()
        data = VariantNavigationService.get_combination_data(product)
        serializer = self.get_serializer(
            product,
            context={**self.get_serializer_context(), 'attribute_domain': data.domain}
        )
        return Response(serializer.data)

    @action(detail=True, methods=['get'])
    def availability(self, request, slug=None):
        """
        Availability of every option given the selection in the query params.

        Example: /products/macbook-pro/availability/?color=Silver
        """
        product = self.get_object()
        data = VariantNavigationService.get_combination_data(product)
        selections = selections_from_query(request.query_params, data.domain)
        payload = VariantNavigationService.get_options_payload(product, selections)
        return Response(payload)

    @action(detail=True, methods=['post'])
    def select(self, request, slug=None):
        """
        Reconcile a selection after an option was picked.

        Expected payload:
        {
            "selections": {"color": "Silver", "storage": "1TB"},
            "changed_attribute": "color"
        }
        """
        product = self.get_object()
        serializer = SelectionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = VariantNavigationService.select_option(
            product,
            serializer.validated_data['selections'],
            serializer.validated_data['changed_attribute'],
        )
        return Response(result)

    @action(detail=True, methods=['get'])
    def resolve(self, request, slug=None):
        """
        Find the variant(s) matching the selection in the query params.
        An empty match is a normal answer, not an error.
        """
        product = self.get_object()
        data = VariantNavigationService.get_combination_data(product)
        selections = selections_from_query(request.query_params, data.domain)
        result = VariantNavigationService.find_best_match(product, selections)
        return Response(result)


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, attributes and stock status.
    """
    queryset = Variant.objects.filter(is_active=True).select_related(
        'product'
    ).prefetch_related(
        Prefetch(
            'variantattribute_set',
            queryset=VariantAttribute.objects.select_related(
                'attribute_option__attribute_type'
            )
        )
    )
    serializer_class = VariantListSerializer
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'name', 'product__name']
    ordering_fields = ['sku', 'sell_price', 'stock_quantity', 'created_at']
    ordering = ['sku']
