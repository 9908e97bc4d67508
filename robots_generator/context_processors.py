"""
Context processor for SEO-related settings.

Provides the INDEXABLE setting and the generator attribution line to Django
templates for use in meta tags and page footers.
"""

from django.conf import settings

from .catalog import ATTRIBUTION

def seo_settings(request):
    """
    Add the INDEXABLE setting and the attribution line to the template context.

    Args:
        request: The current HttpRequest object.

    Returns:
        dict: A dictionary with the INDEXABLE setting and ATTRIBUTION text.
    """
    return {
        'INDEXABLE': settings.INDEXABLE,
        'ATTRIBUTION': ATTRIBUTION.lstrip('# '),
    }
