"""
Service: SettingsService

Runtime-mutable bot configuration.

Each known key has an environment default (base/constants.py). A row in
the settings table overrides it; the admin API writes rows, the pipeline
reads a fresh RuntimeConfig snapshot at the start of every turn. Vendor
clients are built from that snapshot, so changing a token never mutates a
client another turn is using.
"""

# Python Packages
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Database
from ...config.database import db

# Models
from ...models.setting import Setting

# Constants
from ...base import constants

# Vendors
from ...vendors.factory import SUPPORTED_PROVIDERS
from ...vendors.openai.openai_client import OpenAIConfig
from ...vendors.anthropic.anthropic_client import AnthropicConfig
from ...vendors.woocommerce.woocommerce_client import WooCommerceConfig
from ...vendors.instagram.graph_client import InstagramConfig

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


ATTACHMENT_MODES = ("message_id", "content_match")
DIGEST_MODES     = ("sequential", "batched")


@dataclass(frozen=True)
class SettingDefinition:
    default: str
    secret: bool = False
    description: str = ""


SETTING_DEFINITIONS: Dict[str, SettingDefinition] = {
    "ai_provider":                 SettingDefinition(constants.AI_PROVIDER, description="LLM provider: openai or anthropic"),
    "openai_api_key":              SettingDefinition(constants.OPENAI_API_KEY, secret=True, description="OpenAI API key"),
    "openai_model":                SettingDefinition(constants.OPENAI_DEFAULT_MODEL, description="OpenAI chat model"),
    "anthropic_api_key":           SettingDefinition(constants.ANTHROPIC_API_KEY, secret=True, description="Anthropic API key"),
    "anthropic_model":             SettingDefinition(constants.ANTHROPIC_DEFAULT_MODEL, description="Anthropic model"),
    "woocommerce_url":             SettingDefinition(constants.WOOCOMMERCE_URL, description="Store base URL"),
    "woocommerce_consumer_key":    SettingDefinition(constants.WOOCOMMERCE_CONSUMER_KEY, secret=True, description="WooCommerce consumer key"),
    "woocommerce_consumer_secret": SettingDefinition(constants.WOOCOMMERCE_CONSUMER_SECRET, secret=True, description="WooCommerce consumer secret"),
    "instagram_page_access_token": SettingDefinition(constants.INSTAGRAM_PAGE_ACCESS_TOKEN, secret=True, description="Instagram page access token"),
    "instagram_verify_token":      SettingDefinition(constants.INSTAGRAM_VERIFY_TOKEN, secret=True, description="Webhook verify token"),
    "typing_delay_ms":             SettingDefinition(str(constants.TYPING_DELAY_MS), description="Typing pause before a reply (ms)"),
    "product_typing_delay_ms":     SettingDefinition(str(constants.PRODUCT_TYPING_DELAY_MS), description="Typing pause before product results (ms)"),
    "intent_attachment_mode":      SettingDefinition(constants.INTENT_ATTACHMENT_MODE, description="message_id or content_match"),
    "product_digest_mode":         SettingDefinition(constants.PRODUCT_DIGEST_MODE, description="sequential or batched"),
}


@dataclass(frozen=True)
class RuntimeConfig:
    """ Snapshot of every setting the pipeline needs for one turn... """

    ai_provider: str
    openai: OpenAIConfig
    anthropic: AnthropicConfig
    woocommerce: WooCommerceConfig
    instagram: InstagramConfig
    typing_delay_ms: int
    product_typing_delay_ms: int
    intent_attachment_mode: str
    product_digest_mode: str


def mask_secret(value: str) -> str:
    if not value:
        return ""
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


class SettingsService:

    # ── Reads ──────────────────────────────────────────────────────────────────

    def get_stored(self) -> Dict[str, str]:
        """ Rows of the settings table as a dict. Empty on DB error... """

        try:
            return {row.key: row.value for row in Setting.query.all()}

        except Exception as exc:
            db.session.rollback()
            logger.warning(f"⚠️  Could not read settings store, using environment defaults: {exc}")
            return {}


    def get_all(self) -> Dict[str, str]:
        """ Effective value of every known key (store over environment)... """

        stored = self.get_stored()
        return {
            key: stored.get(key, definition.default)
            for key, definition in SETTING_DEFINITIONS.items()
        }


    def get(self, key: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Returns:
            (value, source) where source is "store" or "environment";
            (None, None) for unknown keys.
        """
        if key not in SETTING_DEFINITIONS:
            return None, None

        stored = self.get_stored()
        if key in stored:
            return stored[key], "store"

        return SETTING_DEFINITIONS[key].default, "environment"


    def get_all_masked(self) -> Dict[str, str]:
        return {
            key: mask_secret(value) if SETTING_DEFINITIONS[key].secret else value
            for key, value in self.get_all().items()
        }

    # ── Writes ─────────────────────────────────────────────────────────────────

    def update(self, updates: Dict[str, str]) -> None:
        """
        Upsert settings. Keys must already be validated.

        Raises:
            Exception: DB error, after rollback.
        """
        try:
            existing = {
                row.key: row
                for row in Setting.query.filter(Setting.key.in_(list(updates))).all()
            }

            for key, value in updates.items():
                row = existing.get(key)
                if row:
                    row.value = str(value)
                else:
                    db.session.add(Setting(
                        key         = key,
                        value       = str(value),
                        description = SETTING_DEFINITIONS[key].description
                    ))

            db.session.commit()

        except Exception:
            db.session.rollback()
            raise

        logger.info(f"⚙️  Settings updated: {', '.join(sorted(updates))}")

    # ── Runtime snapshot ───────────────────────────────────────────────────────

    def load_runtime_config(self) -> RuntimeConfig:
        """
        Build the per-turn configuration snapshot.
        Invalid stored values fall back to the environment default.
        """
        values = self.get_all()

        provider = values["ai_provider"].lower().strip()
        if provider not in SUPPORTED_PROVIDERS:
            logger.warning(f"⚠️  Unsupported ai_provider '{provider}', using '{constants.AI_PROVIDER}'")
            provider = constants.AI_PROVIDER

        return RuntimeConfig(
            ai_provider = provider,
            openai = OpenAIConfig(
                api_key = values["openai_api_key"],
                model   = values["openai_model"] or constants.OPENAI_DEFAULT_MODEL
            ),
            anthropic = AnthropicConfig(
                api_key = values["anthropic_api_key"],
                model   = values["anthropic_model"] or constants.ANTHROPIC_DEFAULT_MODEL
            ),
            woocommerce = WooCommerceConfig(
                url             = values["woocommerce_url"],
                consumer_key    = values["woocommerce_consumer_key"],
                consumer_secret = values["woocommerce_consumer_secret"]
            ),
            instagram = InstagramConfig(
                access_token = values["instagram_page_access_token"],
                verify_token = values["instagram_verify_token"]
            ),
            typing_delay_ms         = self._to_delay(values, "typing_delay_ms", constants.TYPING_DELAY_MS),
            product_typing_delay_ms = self._to_delay(values, "product_typing_delay_ms", constants.PRODUCT_TYPING_DELAY_MS),
            intent_attachment_mode  = self._to_choice(values, "intent_attachment_mode", ATTACHMENT_MODES, "message_id"),
            product_digest_mode     = self._to_choice(values, "product_digest_mode", DIGEST_MODES, "sequential"),
        )


    @staticmethod
    def _to_delay(values: Dict[str, str], key: str, default: int) -> int:
        try:
            delay = int(values[key])
        except (TypeError, ValueError):
            logger.warning(f"⚠️  Invalid {key}={values[key]!r}, using {default}")
            return default
        return max(delay, 0)


    @staticmethod
    def _to_choice(values: Dict[str, str], key: str, choices, fallback: str) -> str:
        value = (values[key] or "").strip()
        if value in choices:
            return value

        logger.warning(f"⚠️  Invalid {key}={value!r}, using {fallback}")
        return fallback
