"""
Catalog settings, read from the VARIANT_RESOLUTION dict in Django settings.

    VARIANT_RESOLUTION = {
        'PREFER_IN_STOCK_INITIAL': True,
    }
"""

from django.conf import settings

DEFAULTS = {
    # Start product views on the first in-stock variant instead of the first one
    'PREFER_IN_STOCK_INITIAL': False,
}


def resolution_setting(name):
    overrides = getattr(settings, 'VARIANT_RESOLUTION', None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
