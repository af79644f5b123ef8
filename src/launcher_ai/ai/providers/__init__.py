"""Upstream chat-completion provider adapters."""
