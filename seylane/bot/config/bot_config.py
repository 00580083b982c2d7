"""
bot_config.py — Pipeline Windows, Caps & Fixed Replies
=======================================================
Numbers and canned texts that shape one turn of the message pipeline.
Environment-driven knobs (delays, attachment mode) live in base/constants.py.
"""

# ── History windows ────────────────────────────────────────────────────────────
# The orchestrator loads this many persisted messages per turn ...
PIPELINE_HISTORY_LIMIT = 10

# ... and the classifier / response generator keep only the newest N of them.
LLM_CONTEXT_WINDOW = 5

# Window searched when attaching an intent by content match (compat mode).
INTENT_MATCH_WINDOW = 5

# ── Catalog ────────────────────────────────────────────────────────────────────
# Products requested from WooCommerce per search.
CATALOG_RESULT_LIMIT = 5

# Products sent as follow-up messages after the summary.
PRODUCT_DIGEST_CAP = 3

# ── Intent defaults ────────────────────────────────────────────────────────────
# Used whenever classification fails or returns something unusable.
DEFAULT_INTENT_CONFIDENCE = 0.5

# ── Fixed replies ──────────────────────────────────────────────────────────────
GENERATION_APOLOGY = (
    "I apologize, but I had trouble processing that. Could you try rephrasing?"
)

PIPELINE_ERROR_APOLOGY = (
    "I apologize, but I encountered an error processing your message. "
    "Please try again or contact support if the issue persists."
)

PRODUCTS_NOT_FOUND_TEMPLATE = (
    "I couldn't find any products matching \"{query}\". "
    "Could you try describing what you're looking for in a different way? 😊"
)

# ── API listing ────────────────────────────────────────────────────────────────
CONVERSATIONS_DEFAULT_LIMIT = 50
CONVERSATIONS_MAX_LIMIT     = 200

LOGS_DEFAULT_LIMIT          = 100
LOGS_MAX_LIMIT              = 500

# ── Analytics ──────────────────────────────────────────────────────────────────
ANALYTICS_ACTIVE_WINDOW_HOURS = 24
ANALYTICS_DEFAULT_DAYS        = 30
ANALYTICS_MAX_DAYS            = 365
