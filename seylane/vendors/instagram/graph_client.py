"""
vendors/instagram/graph_client.py
==================================
Instagram Messaging via the Meta Graph API.

    POST /me/messages            text messages and sender actions
    GET  /<user_id>              profile (name, username)
    GET  /me                     connection test

The page access token travels as the access_token query parameter.
Calls are attempted once with a bounded timeout and return Outcome values.
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


SENDER_ACTIONS = ("typing_on", "typing_off", "mark_seen")





@dataclass(frozen=True)
class InstagramConfig:

    access_token: str = ""
    verify_token: str = ""
    api_version: str = constants.GRAPH_API_VERSION
    base_url: str = constants.GRAPH_API_BASE_URL
    timeout: float = constants.HTTP_TIMEOUT_SECONDS


    @classmethod
    def from_constants(cls) -> "InstagramConfig":
        return cls(
            access_token = constants.INSTAGRAM_PAGE_ACCESS_TOKEN,
            verify_token = constants.INSTAGRAM_VERIFY_TOKEN
        )


    @property
    def api_base(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}"





class InstagramGraphClient:
    """ Graph API client bound to one immutable InstagramConfig... """

    def __init__(self, config: Optional[InstagramConfig] = None):
        self.config = config or InstagramConfig.from_constants()

        if not self.config.access_token:
            logger.warning("⚠️  INSTAGRAM_PAGE_ACCESS_TOKEN not set")
        if not self.config.verify_token:
            logger.warning("⚠️  INSTAGRAM_VERIFY_TOKEN not set")


    def reconfigure(self, **changes) -> "InstagramGraphClient":
        return InstagramGraphClient(replace(self.config, **changes))


    # ── Outbound ───────────────────────────────────────────────────────────────
    def send_text(self, recipient_id: str, text: str) -> Outcome:
        """ Send one text message to *recipient_id*... """

        return self._post_messages({
            "recipient": {"id": recipient_id},
            "message":   {"text": text},
        })


    def send_sender_action(self, recipient_id: str, action: str) -> Outcome:
        """ Send typing_on / typing_off / mark_seen... """

        if action not in SENDER_ACTIONS:
            raise ValueError(f"Unsupported sender action: {action}")

        return self._post_messages({
            "recipient":     {"id": recipient_id},
            "sender_action": action,
        })


    # ── Lookups ────────────────────────────────────────────────────────────────
    def get_user_profile(self, user_id: str) -> Outcome:
        """ Outcome value: {"name": ..., "username": ...} (keys may be missing)... """

        return self._get(user_id, {"fields": "name,username"})


    def get_me(self) -> Outcome:
        return self._get("me")


    def test_connection(self) -> Outcome:
        result = self.get_me()
        if not result.ok:
            return result

        body = result.value or {}
        return Outcome.success(
            f"Connected successfully to account: {body.get('name') or body.get('id')}"
        )


    # ── Private ────────────────────────────────────────────────────────────────
    def _post_messages(self, payload: Dict[str, Any]) -> Outcome:
        if not self.config.access_token:
            return Outcome.failure(ErrorKind.NOT_CONFIGURED, "Access token not configured")

        try:
            response = requests.post(
                f"{self.config.api_base}/me/messages",
                json    = payload,
                params  = {"access_token": self.config.access_token},
                timeout = self.config.timeout
            )
        except requests.RequestException as e:
            return Outcome.failure(ErrorKind.TRANSPORT, str(e))

        return self._to_outcome(response)


    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Outcome:
        if not self.config.access_token:
            return Outcome.failure(ErrorKind.NOT_CONFIGURED, "Access token not configured")

        query = dict(params or {})
        query["access_token"] = self.config.access_token

        try:
            response = requests.get(
                f"{self.config.api_base}/{path}",
                params  = query,
                timeout = self.config.timeout
            )
        except requests.RequestException as e:
            return Outcome.failure(ErrorKind.TRANSPORT, str(e))

        return self._to_outcome(response)


    @staticmethod
    def _to_outcome(response) -> Outcome:
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code >= 400:
            message, code = response.text, None
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                message = body["error"].get("message") or message
                code    = body["error"].get("code")

            # 190: invalid or expired OAuth access token
            if response.status_code in (401, 403) or code == 190:
                kind = ErrorKind.AUTH
            else:
                kind = ErrorKind.TRANSPORT
            return Outcome.failure(kind, message)

        if body is None:
            return Outcome.failure(ErrorKind.PARSE, "Invalid JSON from Graph API")

        return Outcome.success(body)
