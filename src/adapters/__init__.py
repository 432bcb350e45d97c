"""Adapters exposing the analytics use cases."""

__all__: list[str] = []
