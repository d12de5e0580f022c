from .client import GitHubClient
from .context import EventContext, load_event_context

__all__ = ["GitHubClient", "EventContext", "load_event_context"]
