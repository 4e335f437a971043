from django.db import models
from django.db.models import Prefetch
from django.utils.text import slugify


class Product(models.Model):
    """
    A sellable line whose purchasable units are its variants.
    Example: "MacBook Pro 14" sold as Space Gray/512GB, Space Gray/1TB, ...

    Which option combinations exist is read from the active variants only;
    nothing on the product itself lists them.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Ativo'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def variant_count(self):
        return self.variants.count()

    @property
    def active_variant_count(self):
        return self.get_active_variants().count()

    def get_active_variants(self):
        """Active variants with their option links prefetched, oldest first."""
        from .variant import VariantAttribute
        return self.variants.filter(is_active=True).prefetch_related(
            Prefetch(
                'variantattribute_set',
                queryset=VariantAttribute.objects.select_related(
                    'attribute_option__attribute_type'
                )
            )
        ).order_by('pk')

    def get_variant_specs(self):
        return tuple(variant.to_spec() for variant in self.get_active_variants())

    def get_attribute_options(self, type_slugs=None):
        """
        This product's options in admin display order: attribute type first,
        then the option's own display_order.
        """
        options = self.attribute_options.select_related('attribute_type')
        if type_slugs is not None:
            options = options.filter(attribute_type__slug__in=list(type_slugs))
        return options.order_by(
            'attribute_type__display_order',
            'attribute_type__name',
            'display_order',
            'value'
        )

    def get_attribute_types(self):
        """Attribute types used by at least one active variant."""
        from .attribute import AttributeType
        return AttributeType.objects.filter(
            options__variantattribute__variant__product=self,
            options__variantattribute__variant__is_active=True
        ).distinct().order_by('display_order', 'name')
