""" WooCommerce Vendor Package... """

from .woocommerce_client import WooCommerceClient, WooCommerceConfig

__all__ = ['WooCommerceClient', 'WooCommerceConfig']
