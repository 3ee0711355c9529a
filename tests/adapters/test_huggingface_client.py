"""Unit tests for HuggingFaceClient."""

import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from relaybot.adapters.llm.huggingface import AI_ERROR_REPLY, HuggingFaceClient
from relaybot.config import AppConfig
from relaybot.ports.outbound import InferencePort

SESSION_PATH = "relaybot.adapters.llm.huggingface.aiohttp.ClientSession"


@pytest.fixture
def config():
    return AppConfig(discord_token="d", hf_token="hf-tok", hf_model="org/model")


class TestRequest:
    @pytest.mark.asyncio
    async def test_post_shape(self, config, fake_session):
        calls = []
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session([{"generated_text": "hi"}], calls=calls)):
            await client.generate("hello")

        assert len(calls) == 1
        method, url, kwargs = calls[0]
        assert method == "POST"
        assert url == "https://api-inference.huggingface.co/models/org/model"
        assert kwargs["json"] == {"inputs": "hello"}
        assert kwargs["headers"] == {"Authorization": "Bearer hf-tok"}
        assert kwargs["session"]["timeout"].total == 60

    def test_implements_port(self, config):
        assert isinstance(HuggingFaceClient(config), InferencePort)


class TestNormalization:
    @pytest.mark.asyncio
    async def test_list_payload(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session([{"generated_text": "X"}])):
            assert await client.generate("p") == "X"

    @pytest.mark.asyncio
    async def test_object_payload(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session({"generated_text": "Z"})):
            assert await client.generate("p") == "Z"

    @pytest.mark.asyncio
    async def test_string_payload(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session("Y")):
            assert await client.generate("p") == "Y"

    @pytest.mark.asyncio
    async def test_plain_text_body_verbatim(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(body="plain answer")):
            assert await client.generate("p") == "plain answer"

    @pytest.mark.asyncio
    async def test_unknown_payload_serialized(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session([{"label": "POSITIVE", "score": 0.9}])):
            assert await client.generate("p") == '[{"label": "POSITIVE", "score": 0.9}]'


class TestFailures:
    @pytest.mark.asyncio
    async def test_null_payload(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(None)):
            assert await client.generate("p") == AI_ERROR_REPLY

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "  \n"])
    async def test_empty_body(self, config, fake_session, body):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(body=body)):
            assert await client.generate("p") == AI_ERROR_REPLY

    @pytest.mark.asyncio
    async def test_http_error(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session({"error": "Unauthorized"}, status=401)):
            assert await client.generate("p") == AI_ERROR_REPLY

    @pytest.mark.asyncio
    async def test_network_error(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(exc=aiohttp.ClientConnectionError("refused"))):
            assert await client.generate("p") == AI_ERROR_REPLY

    @pytest.mark.asyncio
    async def test_timeout(self, config, fake_session):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(exc=asyncio.TimeoutError())):
            assert await client.generate("p") == AI_ERROR_REPLY

    @pytest.mark.asyncio
    async def test_error_logged(self, config, fake_session, capsys):
        client = HuggingFaceClient(config)
        with patch(SESSION_PATH, fake_session(exc=aiohttp.ClientConnectionError("refused"))):
            await client.generate("p")
        err = capsys.readouterr().err
        assert "[huggingface]" in err
        assert "hf-tok" not in err
