"""
Service: ResponseGenerator
===========================
Generates the customer-facing reply text.

Modes
-----
reply     Generic conversational answer in the store persona, with the
          last few turns and the classified intent as context.
product   Short summary before the product list: paraphrases the request,
          states how many products were found, invites a look. No model call
          when nothing was found.

Both modes fail soft: a failed or empty completion returns
bot_config.GENERATION_APOLOGY instead of raising.
"""

# Python Packages
from typing import Any, Dict, List, Optional

# Config
from ..config import prompts, llm_config, bot_config

# Services
from .intent_classifier import build_history_turns

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


class ResponseGenerator:
    """
    LLM wrapper for both reply modes. Stateless: context is passed per call.
    """

    def __init__(self, chat_service):
        self.chat_service = chat_service


    # ── Conversational Reply ───────────────────────────────────────────────────
    def generate_reply(
        self,
        user_message: str,
        history: Optional[List[Dict]] = None,
        intent: Optional[str] = None
    ) -> str:
        logger.info("💬 Generating conversational response...")

        system_prompt = prompts.REPLY_SYSTEM_PROMPT
        if intent:
            system_prompt += prompts.REPLY_INTENT_SECTION.format(intent = intent)

        messages = [{"role": "system", "content": system_prompt}]
        messages.extend(build_history_turns(history, bot_config.LLM_CONTEXT_WINDOW))
        messages.append({"role": "user", "content": user_message})

        result = self.chat_service.generate_response(
            messages    = messages,
            temperature = llm_config.LLM_REPLY_TEMPERATURE,
            max_tokens  = llm_config.LLM_REPLY_MAX_TOKENS
        )

        if not result.ok:
            logger.error(f"Error generating response ({result.error_kind}): {result.details}")
            return bot_config.GENERATION_APOLOGY

        return result.value


    # ── Product Summary ────────────────────────────────────────────────────────
    def generate_product_reply(self, products: List[Dict[str, Any]], original_query: str) -> str:
        """
        Summary text for a product search.

        Args:
            products:       Candidates returned by CatalogSearchService.
            original_query: The customer's message, quoted back to the model.
        """

        if not products:
            return bot_config.PRODUCTS_NOT_FOUND_TEMPLATE.format(query = original_query)

        messages = [
            {
                "role":    "system",
                "content": prompts.PRODUCT_SYSTEM_PROMPT.format(
                    query = original_query,
                    count = len(products)
                )
            },
            {
                "role":    "user",
                "content": prompts.PRODUCT_USER_TEMPLATE.format(
                    names = ", ".join(str(p.get("name") or "") for p in products)
                )
            },
        ]

        result = self.chat_service.generate_response(
            messages    = messages,
            temperature = llm_config.LLM_PRODUCT_TEMPERATURE,
            max_tokens  = llm_config.LLM_PRODUCT_MAX_TOKENS
        )

        if not result.ok:
            logger.error(f"Error generating product message ({result.error_kind}): {result.details}")
            return bot_config.GENERATION_APOLOGY

        return result.value
