"""
Service: CatalogSearchService
==============================
Maps an IntentAnalysis onto a WooCommerce product query, then narrows the
result client-side.

Query construction
------------------
  search      keywords joined by spaces, else productType
  category    parameters.category
  min_price   parameters.minPrice
  max_price   parameters.maxPrice
  always      per_page=5, status=publish, stock_status=instock

Post-filter (fixed order, AND-composed, never rolled back)
-----------------------------------------------------------
  1. color  attribute "color" has an option containing the value
  2. size   attribute "size" has an option containing the value
  3. brand  product name contains the value
All comparisons are case-insensitive. A filter that removes every product
leaves the list empty; later filters keep it empty.

Any catalog failure returns []; this service never raises.
"""

# Python Packages
from typing import Any, Dict, List, Optional

# Config
from ..config import bot_config, prompts

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def _list(value) -> list:
    return value if isinstance(value, list) else []


class CatalogSearchService:
    """
    Catalog search adapter over a WooCommerceClient.
    """

    def __init__(self, woocommerce_client):
        self.client = woocommerce_client


    def is_ready(self) -> bool:
        """ True when the catalog client has URL + credentials... """

        return self.client.is_configured


    # ── Search ─────────────────────────────────────────────────────────────────
    def search_products(self, intent_analysis) -> List[Dict[str, Any]]:
        """
        Search products matching the intent parameters.

        Returns:
            Ordered list of product dicts (at most CATALOG_RESULT_LIMIT).
        """

        if not self.is_ready():
            logger.error("WooCommerce API not configured")
            return []

        parameters = intent_analysis.parameters or {}

        result = self.client.query_products(self.build_query(parameters))
        if not result.ok:
            logger.error(f"❌ Error searching products ({result.error_kind}): {result.details}")
            return []

        items = _list(result.value)
        products = [p for p in items if isinstance(p, dict)]
        if len(products) != len(items):
            logger.warning(f"⚠️  Dropped {len(items) - len(products)} malformed catalog items")

        products = self.apply_post_filters(products, parameters)
        logger.info(f"✅ Found {len(products)} products")
        return products


    def build_query(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """ Translate intent parameters into WooCommerce query params... """

        query = {
            "per_page":     bot_config.CATALOG_RESULT_LIMIT,
            "status":       "publish",
            "stock_status": "instock",
        }

        keywords = parameters.get("keywords")
        if keywords:
            query["search"] = " ".join(keywords)
        elif parameters.get("productType"):
            query["search"] = parameters["productType"]

        if parameters.get("category"):
            query["category"] = parameters["category"]

        if parameters.get("minPrice"):
            query["min_price"] = self._price_param(parameters["minPrice"])
        if parameters.get("maxPrice"):
            query["max_price"] = self._price_param(parameters["maxPrice"])

        return query


    def apply_post_filters(self, products: List[Dict[str, Any]], parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """ color → size → brand, each only when its parameter is present... """

        filtered = list(products)

        if parameters.get("color"):
            filtered = self.filter_by_attribute(filtered, "color", parameters["color"])

        if parameters.get("size"):
            filtered = self.filter_by_attribute(filtered, "size", parameters["size"])

        if parameters.get("brand"):
            brand = parameters["brand"].lower()
            filtered = [p for p in filtered if brand in _text(p.get("name")).lower()]

        return filtered


    @staticmethod
    def filter_by_attribute(products: List[Dict[str, Any]], attribute_name: str, value: str) -> List[Dict[str, Any]]:
        """ Keep products whose *attribute_name* attribute has an option containing *value*... """

        needle = value.lower()
        matches = []

        for product in products:
            attribute = next(
                (
                    attr for attr in _list(product.get("attributes"))
                    if isinstance(attr, dict) and _text(attr.get("name")).lower() == attribute_name.lower()
                ),
                None
            )
            if attribute is None:
                continue

            if any(needle in str(option).lower() for option in _list(attribute.get("options"))):
                matches.append(product)

        return matches


    # ── Lookups ────────────────────────────────────────────────────────────────
    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        result = self.client.get_product(product_id)
        if not result.ok:
            logger.error(f"Error fetching product {product_id}: {result.details}")
            return None
        return result.value


    def get_categories(self) -> List[Dict[str, Any]]:
        result = self.client.get_categories()
        if not result.ok:
            logger.error(f"Error fetching categories: {result.details}")
            return []
        return result.value


    def search_by_keyword(self, keyword: str, limit: int = bot_config.CATALOG_RESULT_LIMIT) -> List[Dict[str, Any]]:
        """ Plain keyword search without intent parameters or post-filters... """

        result = self.client.query_products({
            "search":       keyword,
            "per_page":     limit,
            "status":       "publish",
            "stock_status": "instock",
        })
        if not result.ok:
            logger.error(f"Error searching by keyword: {result.details}")
            return []
        return result.value


    # ── Formatting ─────────────────────────────────────────────────────────────
    @staticmethod
    def format_products_for_message(products: List[Dict[str, Any]]) -> str:
        """
        Render all products into a single message.
        Used by the batched digest mode instead of one message per product.
        """

        if not products:
            return prompts.PRODUCT_LIST_EMPTY

        message = prompts.PRODUCT_LIST_HEADER.format(
            count  = len(products),
            plural = "s" if len(products) > 1 else ""
        )

        items = []
        for index, product in enumerate(products, start = 1):
            item = prompts.PRODUCT_LIST_ITEM.format(
                index     = index,
                name      = product.get("name", ""),
                price     = product.get("price", ""),
                permalink = product.get("permalink", "")
            )
            if product.get("on_sale") and product.get("sale_price"):
                item += prompts.PRODUCT_LIST_SALE
            items.append(item)

        return message + "\n".join(items)


    @staticmethod
    def _price_param(value) -> str:
        # 50.0 -> "50", 49.99 -> "49.99"
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
