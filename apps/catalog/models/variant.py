from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.catalog.services.matrix import VariantSpec


class Variant(models.Model):
    """
    Individual SKU with its own price and stock.
    Each variant is a unique combination of attribute options.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Produto'
    )
    sku = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='SKU'
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Nome',
        help_text='Nome personalizado (opcional)'
    )
    sell_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço de venda'
    )

    # Inventory
    stock_quantity = models.IntegerField(
        default=0,
        verbose_name='Quantidade em estoque'
    )
    track_inventory = models.BooleanField(
        default=True,
        verbose_name='Rastrear estoque'
    )
    allow_backorder = models.BooleanField(
        default=False,
        verbose_name='Permitir compra sem estoque'
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

    # Attribute options for this variant
    attribute_options = models.ManyToManyField(
        'catalog.AttributeOption',
        through='VariantAttribute',
        related_name='variants',
        verbose_name='Opções de atributos'
    )

    class Meta:
        ordering = ['product', 'sku']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.name or self.sku

    def _attribute_rows(self):
        # Sorted in Python so a prefetched variantattribute_set is reused
        return sorted(
            self.variantattribute_set.all(),
            key=lambda va: (
                va.attribute_option.attribute_type.display_order,
                va.attribute_option.attribute_type.name,
            )
        )

    def get_display_name(self):
        """Product name plus the display values of the variant's options."""
        rows = self._attribute_rows()
        if not rows:
            return f"{self.product.name} - {self.sku}"
        option_strings = [va.attribute_option.get_display_value() for va in rows]
        return f"{self.product.name} - {' / '.join(option_strings)}"

    def get_options_dict(self):
        """Return dict of {attribute_slug: option_value}"""
        return {
            va.attribute_option.attribute_type.slug: va.attribute_option.value
            for va in self._attribute_rows()
        }

    def to_spec(self):
        """
        Immutable snapshot used by the combination services.

        Untracked or backorderable variants carry no quantity, which the
        services read as "never runs out".
        """
        counts_stock = self.track_inventory and not self.allow_backorder
        return VariantSpec(
            id=self.pk,
            values=tuple(
                va.attribute_option.to_defining_value()
                for va in self._attribute_rows()
            ),
            stock_quantity=self.stock_quantity if counts_stock else None,
            in_stock=self.is_in_stock,
        )

    @property
    def is_in_stock(self):
        if not self.track_inventory:
            return True
        return self.stock_quantity > 0 or self.allow_backorder


class VariantAttribute(models.Model):
    """
    Through model linking Variant to AttributeOption.
    Ensures each variant has only one value per attribute type.
    """
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        verbose_name='Variante'
    )
    attribute_option = models.ForeignKey(
        'catalog.AttributeOption',
        on_delete=models.CASCADE,
        verbose_name='Opção de Atributo'
    )

    class Meta:
        unique_together = ['variant', 'attribute_option']
        verbose_name = 'Atributo da Variante'
        verbose_name_plural = 'Atributos das Variantes'

    def __str__(self):
        return f"{self.variant.sku} - {self.attribute_option}"

    def save(self, *args, **kwargs):
        # Ensure only one option per attribute type per variant
        existing = VariantAttribute.objects.filter(
            variant=self.variant,
            attribute_option__attribute_type=self.attribute_option.attribute_type
        ).exclude(pk=self.pk)

        if existing.exists():
            existing.delete()

        super().save(*args, **kwargs)
