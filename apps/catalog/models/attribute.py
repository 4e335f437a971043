from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models

from apps.catalog.services.matrix import DefiningValue


class AttributeType(models.Model):
    """
    An axis a product varies along: Color, Storage, Size...

    The slug is the attribute name everywhere selections travel, e.g.
    {'color': 'Silver'} in query strings, request bodies and cache payloads.
    """
    DATATYPE_CHOICES = [
        ('text', 'Texto'),
        ('number', 'Número'),
        ('decimal', 'Decimal'),
        ('color', 'Cor (Hex)'),
    ]

    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        verbose_name='Slug'
    )
    datatype = models.CharField(
        max_length=20,
        choices=DATATYPE_CHOICES,
        default='text',
        verbose_name='Tipo de dado'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Tipo de Atributo'
        verbose_name_plural = 'Tipos de Atributos'

    def __str__(self):
        return self.name

    @property
    def is_color(self):
        return self.datatype == 'color'


class AttributeOption(models.Model):
    """
    One value of an attribute type for one product ("Silver" for the
    MacBook's color). The value is what selections carry; display_value is
    only ever shown.
    """
    hex_color_validator = RegexValidator(
        regex=r'^#[0-9A-Fa-f]{6}$',
        message='Cor deve estar no formato hexadecimal (#RRGGBB)'
    )

    attribute_type = models.ForeignKey(
        AttributeType,
        on_delete=models.CASCADE,
        related_name='options',
        verbose_name='Tipo de Atributo'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='attribute_options',
        verbose_name='Produto'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    display_value = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Valor de exibição',
        help_text='Nome alternativo para exibição (opcional)'
    )
    color_hex = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Cor Hex',
        help_text='Para swatches de cor (#RRGGBB)'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'value']
        unique_together = ['attribute_type', 'product', 'value']
        verbose_name = 'Opção de Atributo'
        verbose_name_plural = 'Opções de Atributos'

    def __str__(self):
        return f"{self.attribute_type.name}: {self.get_display_value()} [{self.product.name}]"

    def clean(self):
        if self.color_hex and not self.attribute_type.is_color:
            raise ValidationError({
                'color_hex': 'Swatches só se aplicam a atributos do tipo cor.'
            })

    def get_display_value(self):
        return self.display_value or self.value

    def to_defining_value(self):
        return DefiningValue(
            name=self.attribute_type.slug,
            value=self.value,
            display_label=self.display_value or None,
        )

    def get_option_details(self):
        """What the storefront needs to render this option besides its state."""
        return {
            'id': self.id,
            'display_value': self.get_display_value(),
            'color_hex': self.color_hex,
        }
