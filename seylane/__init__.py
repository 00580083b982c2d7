""" Seylane: Instagram DM customer-support bot backed by WooCommerce... """

__version__ = "1.0.0"
