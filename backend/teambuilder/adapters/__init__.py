from .base import BaseProvider
from .claude_adapter import ClaudeProvider
from .factory import create_provider
from .gemini_adapter import GeminiProvider
from .openai_adapter import OpenAIProvider

__all__ = ["BaseProvider", "ClaudeProvider", "GeminiProvider", "OpenAIProvider", "create_provider"]
