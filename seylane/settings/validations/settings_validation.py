"""
Settings validation for the settings endpoints.
"""

# Exceptions
from ...util.exceptions import ValidationException, NotFoundException

# Messages
from ...util import messages

# Services
from ...bot.services.settings_service import SETTING_DEFINITIONS, ATTACHMENT_MODES, DIGEST_MODES
from ...vendors.factory import SUPPORTED_PROVIDERS


CONNECTION_TEST_SERVICES = ("openai", "anthropic", "woocommerce", "instagram")

DELAY_KEYS = ("typing_delay_ms", "product_typing_delay_ms")

CHOICE_KEYS = {
    "ai_provider":            SUPPORTED_PROVIDERS,
    "intent_attachment_mode": ATTACHMENT_MODES,
    "product_digest_mode":    DIGEST_MODES,
}





class SettingsValidation:

    @staticmethod
    def validate_updates(data) -> dict:
        """
        Validate a settings update body.

        Returns:
            {key: str value} ready for SettingsService.update()
        """

        if not isinstance(data, dict) or not data:
            raise ValidationException(
                error_code = "SETTINGS_EMPTY",
                message = messages.ERROR["SETTINGS_EMPTY"]
            )

        updates = {}
        for key, value in data.items():
            if key not in SETTING_DEFINITIONS:
                raise ValidationException(
                    error_code = "UNKNOWN_SETTING",
                    message = messages.ERROR["SETTINGS_UNKNOWN_KEY"].format(key = key)
                )

            updates[key] = SettingsValidation.validate_value(key, value)

        return updates


    @staticmethod
    def validate_value(key, value) -> str:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValidationException(
                error_code = "INVALID_SETTING_VALUE",
                message = messages.ERROR["SETTINGS_INVALID_VALUE"].format(key = key)
            )

        value = str(value).strip()

        if key in DELAY_KEYS and (not value.isdigit()):
            raise ValidationException(
                error_code = "INVALID_SETTING_VALUE",
                message = messages.ERROR["SETTINGS_INVALID_VALUE"].format(key = key),
                details = "Expected a non-negative integer (milliseconds)."
            )

        if key in CHOICE_KEYS and value.lower() not in CHOICE_KEYS[key]:
            raise ValidationException(
                error_code = "INVALID_SETTING_VALUE",
                message = messages.ERROR["SETTINGS_INVALID_VALUE"].format(key = key),
                details = f"Allowed values: {', '.join(CHOICE_KEYS[key])}"
            )

        if key in CHOICE_KEYS:
            value = value.lower()

        return value


    @staticmethod
    def validate_key(key):
        if key not in SETTING_DEFINITIONS:
            raise NotFoundException(messages.ERROR["SETTING_NOT_FOUND"])


    @staticmethod
    def validate_service(service):
        if service not in CONNECTION_TEST_SERVICES:
            raise NotFoundException(messages.ERROR["UNKNOWN_SERVICE"].format(service = service))
