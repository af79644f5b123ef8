"""Launcher AI - chat-completion providers for a desktop launcher.

Key components:
    - Entry: Launcher entry produced for each configured prompt
    - launcher_ai.ai: Providers, configuration and conversation state
    - CLI: List prompts and talk to them from a terminal

Quick start:
    # Configure prompts in ~/.config/launcher-ai/config.yaml, then
    export GROK_API_KEY=...

    launcher-ai prompts
    launcher-ai ask "What is a monad?" --prompt "Ask Grok"
    launcher-ai chat --prompt "Ask Grok"
"""

from .entries import Entry, MatchingAlgorithm

# AI providers - import from the subpackage to avoid pulling in httpx for basic usage
# Use: from launcher_ai.ai import create_provider, AIConfig

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "MatchingAlgorithm",
    "__version__",
]
