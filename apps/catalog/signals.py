"""
Django signals for the catalog app.
Drops a product's cached combination matrix whenever its variants change.
"""

from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from .models import AttributeOption, Product, Variant, VariantAttribute
from .services.variant_navigation import VariantNavigationService


@receiver(post_save, sender=Product)
@receiver(post_delete, sender=Product)
def invalidate_product_options(sender, instance, **kwargs):
    VariantNavigationService.invalidate(instance.pk)


@receiver(post_save, sender=Variant)
@receiver(post_delete, sender=Variant)
@receiver(post_save, sender=AttributeOption)
@receiver(post_delete, sender=AttributeOption)
def invalidate_variant_options(sender, instance, **kwargs):
    """Variants and options both belong to exactly one product."""
    VariantNavigationService.invalidate(instance.product_id)


@receiver(post_save, sender=VariantAttribute)
@receiver(post_delete, sender=VariantAttribute)
def invalidate_variant_attribute_options(sender, instance, **kwargs):
    """
    Linking or unlinking an option changes which values co-occur.
    """
    try:
        product_id = Variant.objects.values_list(
            'product_id', flat=True
        ).get(pk=instance.variant_id)
    except Variant.DoesNotExist:
        # Cascade delete of the variant, already invalidated by its own signal
        return

    VariantNavigationService.invalidate(product_id)


@receiver(m2m_changed, sender=Variant.attribute_options.through)
def invalidate_on_option_links(sender, instance, action, reverse, pk_set, **kwargs):
    """variant.attribute_options.add() bulk-creates links without post_save."""
    if action not in ('post_add', 'post_remove', 'post_clear'):
        return

    if not reverse:
        VariantNavigationService.invalidate(instance.product_id)
        return

    # instance is an AttributeOption; pk_set holds variant ids (None on clear)
    VariantNavigationService.invalidate(instance.product_id)
    if pk_set:
        product_ids = Variant.objects.filter(
            pk__in=pk_set
        ).values_list('product_id', flat=True).distinct()
        for product_id in product_ids:
            VariantNavigationService.invalidate(product_id)
