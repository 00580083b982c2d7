"""Vendor client tests with requests and the LLM SDKs mocked."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
import requests

from seylane.util.outcome import ErrorKind
from seylane.vendors import ChatService, SUPPORTED_PROVIDERS
from seylane.vendors.anthropic import AnthropicConfig
from seylane.vendors.instagram import InstagramConfig, InstagramGraphClient
from seylane.vendors.openai import OpenAIConfig
from seylane.vendors.woocommerce import WooCommerceClient, WooCommerceConfig


def http_response(status_code=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = body
    return response


WOO_CONFIG = WooCommerceConfig(
    url="https://shop.example.com/",
    consumer_key="ck_1",
    consumer_secret="cs_1",
)

IG_CONFIG = InstagramConfig(access_token="IGQ-token", verify_token="verify-me")


class TestWooCommerceClient:
    """WooCommerce REST calls."""

    @patch("seylane.vendors.woocommerce.woocommerce_client.requests.get")
    def test_query_products(self, get):
        """Test product queries hit wc/v3 with credentials and a timeout."""
        get.return_value = http_response(body=[{"id": 1}])

        result = WooCommerceClient(WOO_CONFIG).query_products({"search": "dress", "per_page": 5})

        assert result.ok and result.value == [{"id": 1}]
        url = get.call_args.args[0]
        kwargs = get.call_args.kwargs
        assert url == "https://shop.example.com/wp-json/wc/v3/products"
        assert kwargs["params"]["search"] == "dress"
        assert kwargs["params"]["consumer_key"] == "ck_1"
        assert kwargs["params"]["consumer_secret"] == "cs_1"
        assert kwargs["timeout"] == WOO_CONFIG.timeout

    def test_not_configured(self):
        """Test missing credentials never reach the network."""
        with patch("seylane.vendors.woocommerce.woocommerce_client.requests.get") as get:
            result = WooCommerceClient(WooCommerceConfig()).query_products({})

        assert result.error_kind == ErrorKind.NOT_CONFIGURED
        get.assert_not_called()

    @pytest.mark.parametrize("status,kind", [(401, ErrorKind.AUTH), (403, ErrorKind.AUTH), (500, ErrorKind.TRANSPORT)])
    @patch("seylane.vendors.woocommerce.woocommerce_client.requests.get")
    def test_http_errors(self, get, status, kind):
        """Test HTTP errors map to error kinds."""
        get.return_value = http_response(status, body={"message": "nope"})

        result = WooCommerceClient(WOO_CONFIG).query_products({})

        assert result.error_kind == kind
        assert result.details == "nope"

    @patch("seylane.vendors.woocommerce.woocommerce_client.requests.get")
    def test_transport_error(self, get):
        """Test a timeout becomes a transport failure."""
        get.side_effect = requests.Timeout("timed out")

        assert WooCommerceClient(WOO_CONFIG).query_products({}).error_kind == ErrorKind.TRANSPORT

    @patch("seylane.vendors.woocommerce.woocommerce_client.requests.get")
    def test_unexpected_shape(self, get):
        """Test a non-list product response is a parse failure."""
        get.return_value = http_response(body={"code": "weird"})

        assert WooCommerceClient(WOO_CONFIG).query_products({}).error_kind == ErrorKind.PARSE

    @patch("seylane.vendors.woocommerce.woocommerce_client.requests.get")
    def test_invalid_json(self, get):
        """Test an HTML body is a parse failure."""
        get.return_value = http_response(body=None, text="<html>")

        assert WooCommerceClient(WOO_CONFIG).get("products").error_kind == ErrorKind.PARSE

    def test_reconfigure_returns_new_client(self):
        """Test reconfigure leaves the original client untouched."""
        client = WooCommerceClient(WOO_CONFIG)

        other = client.reconfigure(url="https://other.example.com")

        assert client.config.url == "https://shop.example.com/"
        assert other.config.url == "https://other.example.com"
        assert other.config.consumer_key == "ck_1"


class TestInstagramGraphClient:
    """Graph API calls."""

    @patch("seylane.vendors.instagram.graph_client.requests.post")
    def test_send_text(self, post):
        """Test a text message is posted to /me/messages."""
        post.return_value = http_response(body={"recipient_id": "u1", "message_id": "m1"})

        result = InstagramGraphClient(IG_CONFIG).send_text("u1", "hello")

        assert result.ok
        assert post.call_args.args[0] == f"{IG_CONFIG.api_base}/me/messages"
        assert post.call_args.kwargs["json"] == {"recipient": {"id": "u1"}, "message": {"text": "hello"}}
        assert post.call_args.kwargs["params"] == {"access_token": "IGQ-token"}

    @patch("seylane.vendors.instagram.graph_client.requests.post")
    def test_sender_action(self, post):
        """Test typing indicators use sender_action."""
        post.return_value = http_response(body={"recipient_id": "u1"})

        InstagramGraphClient(IG_CONFIG).send_sender_action("u1", "typing_on")

        assert post.call_args.kwargs["json"] == {"recipient": {"id": "u1"}, "sender_action": "typing_on"}

    def test_unknown_sender_action(self):
        """Test unsupported sender actions are rejected."""
        with pytest.raises(ValueError):
            InstagramGraphClient(IG_CONFIG).send_sender_action("u1", "dance")

    @patch("seylane.vendors.instagram.graph_client.requests.post")
    def test_expired_token(self, post):
        """Test Graph error code 190 is an auth failure."""
        post.return_value = http_response(400, body={"error": {"message": "Session expired", "code": 190}})

        result = InstagramGraphClient(IG_CONFIG).send_text("u1", "hello")

        assert result.error_kind == ErrorKind.AUTH
        assert result.details == "Session expired"

    @patch("seylane.vendors.instagram.graph_client.requests.post")
    def test_connection_error(self, post):
        """Test a connection error is a transport failure."""
        post.side_effect = requests.ConnectionError("refused")

        assert InstagramGraphClient(IG_CONFIG).send_text("u1", "hello").error_kind == ErrorKind.TRANSPORT

    def test_not_configured(self):
        """Test a missing page token never reaches the network."""
        with patch("seylane.vendors.instagram.graph_client.requests.post") as post:
            result = InstagramGraphClient(InstagramConfig()).send_text("u1", "hello")

        assert result.error_kind == ErrorKind.NOT_CONFIGURED
        post.assert_not_called()

    @patch("seylane.vendors.instagram.graph_client.requests.get")
    def test_profile_and_connection(self, get):
        """Test profile lookups and the connection test use GET."""
        get.return_value = http_response(body={"id": "1", "name": "Seylane Shop", "username": "seylane"})
        client = InstagramGraphClient(IG_CONFIG)

        profile = client.get_user_profile("u1")
        connection = client.test_connection()

        assert profile.value["username"] == "seylane"
        assert get.call_args_list[0].kwargs["params"]["fields"] == "name,username"
        assert connection.value == "Connected successfully to account: Seylane Shop"


class TestChatServices:
    """LLM providers behind the factory."""

    def test_factory(self):
        """Test both providers are available and unknown ones rejected."""
        assert SUPPORTED_PROVIDERS == ("openai", "anthropic")
        assert ChatService(provider="openai", openai_config=OpenAIConfig()).provider == "openai"
        assert ChatService(provider="anthropic", anthropic_config=AnthropicConfig()).provider == "anthropic"

        with pytest.raises(ValueError):
            ChatService(provider="mistral")

    def test_openai_not_configured(self):
        """Test a missing key is reported without calling the SDK."""
        result = ChatService(provider="openai", openai_config=OpenAIConfig()).generate_response([])

        assert result.error_kind == ErrorKind.NOT_CONFIGURED

    def test_openai_completion(self):
        """Test the completion text is returned stripped."""
        service = ChatService(provider="openai", openai_config=OpenAIConfig(api_key="sk-test", model="gpt-4"))
        sdk = MagicMock()
        sdk.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="  Hello!  "))]
        )

        with patch.object(service.openai_client, "_client", sdk):
            result = service.generate_response([{"role": "user", "content": "hi"}], temperature=0.3, max_tokens=20)

        assert result.ok and result.value == "Hello!"
        kwargs = sdk.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 20

    def test_openai_empty_completion(self):
        """Test an empty completion is a parse failure."""
        service = ChatService(provider="openai", openai_config=OpenAIConfig(api_key="sk-test"))
        sdk = MagicMock()
        sdk.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=""))]
        )

        with patch.object(service.openai_client, "_client", sdk):
            assert service.generate_response([]).error_kind == ErrorKind.PARSE

    def test_anthropic_splits_system_prompt(self):
        """Test system text moves to the system parameter and turns alternate."""
        service = ChatService(provider="anthropic", anthropic_config=AnthropicConfig(api_key="sk-ant"))
        sdk = MagicMock()
        sdk.messages.create.return_value = SimpleNamespace(content=[SimpleNamespace(type="text", text="Hi!")])

        with patch.object(service.anthropic_client, "_client", sdk):
            result = service.generate_response([
                {"role": "system", "content": "Be nice."},
                {"role": "assistant", "content": "orphan"},
                {"role": "user", "content": "hello"},
                {"role": "user", "content": "anyone?"},
            ], temperature=1.5)

        assert result.value == "Hi!"
        kwargs = sdk.messages.create.call_args.kwargs
        assert kwargs["system"] == "Be nice."
        assert kwargs["messages"] == [{"role": "user", "content": "hello\n\nanyone?"}]
        assert kwargs["temperature"] == 1.0

    def test_anthropic_transport_error(self):
        """Test SDK exceptions become transport failures."""
        service = ChatService(provider="anthropic", anthropic_config=AnthropicConfig(api_key="sk-ant"))
        sdk = MagicMock()
        sdk.messages.create.side_effect = RuntimeError("overloaded")

        with patch.object(service.anthropic_client, "_client", sdk):
            assert service.generate_response([{"role": "user", "content": "hi"}]).error_kind == ErrorKind.TRANSPORT
