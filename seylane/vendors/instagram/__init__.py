""" Instagram (Meta Graph API) Vendor Package... """

from .graph_client import InstagramGraphClient, InstagramConfig, SENDER_ACTIONS

__all__ = ['InstagramGraphClient', 'InstagramConfig', 'SENDER_ACTIONS']
