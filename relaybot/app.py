"""Bootstrap: configuration, clients, dispatcher, gateway session, web server."""

import asyncio
import sys

import uvicorn

from relaybot.adapters.discord.bot import RelayBot
from relaybot.adapters.llm.huggingface import HuggingFaceClient
from relaybot.adapters.news.newsapi import NewsApiClient
from relaybot.adapters.web.server import LivenessServer, create_app
from relaybot.config import AppConfig, ConfigError
from relaybot.domain.dispatcher import CommandDispatcher


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: AppConfig) -> RelayBot:
    """Wire the outbound clients into a dispatcher and a gateway session."""
    news = NewsApiClient(config)
    if not news.is_configured:
        _log("[relaybot] NEWS_API not set, !news will reply with a notice")
    dispatcher = CommandDispatcher(inference=HuggingFaceClient(config), news=news)
    return RelayBot(dispatcher)


def build_web_server(config: AppConfig) -> LivenessServer:
    server_config = uvicorn.Config(
        create_app(), host="0.0.0.0", port=config.port, log_level="warning",
    )
    return LivenessServer(server_config)


async def run(config: AppConfig) -> int:
    """Serve the liveness app and the gateway session until exit.

    Returns the process exit code: 1 when the gateway login fails.
    """
    server = build_web_server(config)
    web_task = asyncio.create_task(server.serve())

    bot = build_bot(config)
    try:
        await bot.start(config.discord_token)
    except Exception as e:
        _log(f"[relaybot] Discord login failed: {e!r}")
        return 1
    finally:
        if not bot.is_closed():
            await bot.close()
        server.should_exit = True
        await web_task
    return 0


def main():
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        _log(f"ERROR: {e}")
        sys.exit(1)
    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":
    main()
