"""relaybot: Discord bridge to Hugging Face inference and NewsAPI."""

__version__ = "0.1.0"
