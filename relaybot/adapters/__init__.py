"""Adapters: Discord gateway, outbound HTTP clients, liveness web app."""
