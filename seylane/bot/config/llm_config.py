"""
llm_config.py — LLM Temperature & Token Settings
=================================================
Every LLM call in the bot pipeline is controlled from here.
No temperatures or max_tokens should be hardcoded inside service files.

Temperature guide:
  0.0 – 0.3  →  Deterministic (intent JSON extraction)
  0.6 – 0.8  →  Natural, varied customer-facing replies
"""

# ── Intent Classification ──────────────────────────────────────────────────────
# Strict JSON output. Low temperature keeps the shape stable.
LLM_INTENT_TEMPERATURE = 0.3
LLM_INTENT_MAX_TOKENS  = 300

# ── Conversational Reply ───────────────────────────────────────────────────────
# 2–3 friendly sentences.
LLM_REPLY_TEMPERATURE = 0.7
LLM_REPLY_MAX_TOKENS  = 200

# ── Product Summary ────────────────────────────────────────────────────────────
# Short enthusiastic summary sent before the product list.
LLM_PRODUCT_TEMPERATURE = 0.8
LLM_PRODUCT_MAX_TOKENS  = 150

