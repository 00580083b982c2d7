"""
intents.py — Closed Intent Vocabulary
======================================
The classifier may only return one of these labels. Anything else is
treated as a classification failure.
"""

PRODUCT_SEARCH   = "product_search"
GENERAL_QUESTION = "general_question"
GREETING         = "greeting"
ORDER_STATUS     = "order_status"
HELP             = "help"
GOODBYE          = "goodbye"
UNKNOWN          = "unknown"

INTENTS = (
    PRODUCT_SEARCH,
    GENERAL_QUESTION,
    GREETING,
    ORDER_STATUS,
    HELP,
    GOODBYE,
    UNKNOWN,
)

# Keys the classifier may return under "parameters" (camelCase, as stored
# in messages.intent_data).
PARAMETER_KEYS = (
    "productType",
    "color",
    "minPrice",
    "maxPrice",
    "category",
    "size",
    "brand",
    "keywords",
)
