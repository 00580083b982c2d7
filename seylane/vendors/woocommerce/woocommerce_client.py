"""
vendors/woocommerce/woocommerce_client.py
==========================================
Thin WooCommerce REST API (wc/v3) client over requests.

Authentication uses the consumer key/secret as query-string parameters,
which works on stores that do not pass the Authorization header through.
Every call is attempted once with a bounded timeout and returns an Outcome.
"""

# Python Packages
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import requests

# Constants
from ...base import constants

# Utils
from ...util.outcome import Outcome, ErrorKind
from ...util.logger import get_logger


logger = get_logger(__name__)





@dataclass(frozen=True)
class WooCommerceConfig:

    url: str = ""
    consumer_key: str = ""
    consumer_secret: str = ""
    api_version: str = constants.WOOCOMMERCE_API_VERSION
    timeout: float = constants.HTTP_TIMEOUT_SECONDS


    @classmethod
    def from_constants(cls) -> "WooCommerceConfig":
        return cls(
            url             = constants.WOOCOMMERCE_URL,
            consumer_key    = constants.WOOCOMMERCE_CONSUMER_KEY,
            consumer_secret = constants.WOOCOMMERCE_CONSUMER_SECRET
        )


    @property
    def is_complete(self) -> bool:
        return bool(self.url and self.consumer_key and self.consumer_secret)





class WooCommerceClient:
    """ WooCommerce REST client bound to one immutable config... """

    def __init__(self, config: Optional[WooCommerceConfig] = None):
        self.config = config or WooCommerceConfig.from_constants()

        if not self.config.is_complete:
            logger.warning("⚠️  WooCommerce credentials not configured")


    @property
    def is_configured(self) -> bool:
        return self.config.is_complete


    def reconfigure(self, **changes) -> "WooCommerceClient":
        """ Return a new client with *changes* applied to the config... """

        return WooCommerceClient(replace(self.config, **changes))


    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Outcome:
        """
        GET /wp-json/<api_version>/<endpoint>

        Returns:
            Outcome with the decoded JSON body.
        """

        if not self.is_configured:
            return Outcome.failure(ErrorKind.NOT_CONFIGURED, "WooCommerce API not configured")

        url = f"{self.config.url.rstrip('/')}/wp-json/{self.config.api_version}/{endpoint.lstrip('/')}"
        query = dict(params or {})
        query["consumer_key"] = self.config.consumer_key
        query["consumer_secret"] = self.config.consumer_secret

        try:
            response = requests.get(url, params = query, timeout = self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"❌ WooCommerce request failed ({endpoint}): {e}")
            return Outcome.failure(ErrorKind.TRANSPORT, str(e))

        if response.status_code in (401, 403):
            logger.error(f"❌ WooCommerce rejected credentials ({response.status_code})")
            return Outcome.failure(ErrorKind.AUTH, self._error_message(response))

        if response.status_code >= 400:
            logger.error(f"❌ WooCommerce error {response.status_code} on {endpoint}")
            return Outcome.failure(ErrorKind.TRANSPORT, self._error_message(response))

        try:
            return Outcome.success(response.json())
        except ValueError as e:
            return Outcome.failure(ErrorKind.PARSE, f"Invalid JSON from WooCommerce: {e}")


    def query_products(self, filter_spec: Dict[str, Any]) -> Outcome:
        """
        GET products with the given filter parameters.

        Returns:
            Outcome whose value is a list of product dicts.
        """

        logger.info(f"🔍 Searching WooCommerce with params: {filter_spec}")

        result = self.get("products", filter_spec)
        if result.ok and not isinstance(result.value, list):
            return Outcome.failure(ErrorKind.PARSE, "Expected a product list")

        return result


    def get_product(self, product_id: int) -> Outcome:
        return self.get(f"products/{product_id}")


    def get_categories(self) -> Outcome:
        return self.get("products/categories", {"per_page": 100})


    def test_connection(self) -> Outcome:
        """ Fetch one product to check URL and credentials... """

        result = self.get("products", {"per_page": 1})
        if result.ok:
            return Outcome.success(f"Connected successfully to {self.config.url}")
        return result


    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text

        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return response.text
