"""Liveness web app."""
