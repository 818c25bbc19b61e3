from .completion_client import CompletionClient
from .config import TeamBuilderConfig
from .directory import InMemoryUserDirectory

__all__ = ["CompletionClient", "TeamBuilderConfig", "InMemoryUserDirectory"]
