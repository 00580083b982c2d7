"""
vendors/__init__.py
====================
Public surface of the vendors package.

    from ...vendors import ChatService            ← provider picked by AI_PROVIDER
    from ...vendors.woocommerce import WooCommerceClient
    from ...vendors.instagram import InstagramGraphClient

Every vendor client returns Outcome values (util/outcome.py) instead of
raising on transport/auth/config problems.
"""

from .factory import get_chat_service, SUPPORTED_PROVIDERS

# Factory function exposed under a class-like name:
#   service = ChatService(provider="openai", openai_config=...)
ChatService = get_chat_service
