"""
bot/config/__init__.py
======================
Public surface of the bot configuration package.

Config files:
  bot_config   — history windows, catalog caps, fixed fallback replies
  llm_config   — LLM temperatures & max_tokens for every call type
  prompts      — ALL system prompts and user prompt templates
  intents      — closed intent vocabulary and parameter keys
"""

from . import bot_config
from . import llm_config
from . import prompts
from . import intents
