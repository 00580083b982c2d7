"""
Settings Controller
Orchestrates between the settings handler and the service layer.
"""

# Services
from ..bot.services.settings_service import SettingsService, SETTING_DEFINITIONS, mask_secret

# Vendors
from ..vendors import ChatService
from ..vendors.woocommerce import WooCommerceClient
from ..vendors.instagram import InstagramGraphClient

# Errors & Exceptions
from ..util import messages
from ..util.exceptions import NotFoundException

# Utils
from ..util.logger import get_logger


logger = get_logger(__name__)





class SettingsController:

    def __init__(self):
        """ Initialize services... """

        self.settings_service = SettingsService()



    def list_settings(self) -> dict:
        """ Effective settings, secrets masked... """

        return self.settings_service.get_all_masked()



    def get_setting(self, key: str) -> dict:
        """
        One setting with where its value came from.

        Raises:
            NotFoundException: key has no value in the store or environment.
        """

        value, source = self.settings_service.get(key)
        if not value:
            raise NotFoundException(messages.ERROR["SETTING_NOT_FOUND"])

        if SETTING_DEFINITIONS[key].secret:
            value = mask_secret(value)

        return {"key": key, "value": value, "source": source}



    def update_settings(self, updates: dict) -> dict:
        self.settings_service.update(updates)

        return {
            "message": messages.SUCCESS["SETTINGS_UPDATE_SUCCESS"],
            "updated": sorted(updates)
        }



    def test_connection(self, service: str) -> dict:
        """
        Check one external service with the current settings.

        Returns:
            {"success": bool, "message": str}
        """

        runtime = self.settings_service.load_runtime_config()

        if service == "openai":
            result = ChatService(provider = "openai", openai_config = runtime.openai).test_connection()
        elif service == "anthropic":
            result = ChatService(provider = "anthropic", anthropic_config = runtime.anthropic).test_connection()
        elif service == "woocommerce":
            result = WooCommerceClient(runtime.woocommerce).test_connection()
        else:
            result = InstagramGraphClient(runtime.instagram).test_connection()

        if not result.ok:
            logger.warning(f"⚠️  {service} connection test failed ({result.error_kind})")
            return {"success": False, "message": result.details or result.error_kind}

        return {"success": True, "message": result.value}
