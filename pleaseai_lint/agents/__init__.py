from pleaseai_lint.agents.registry import (
    AGENT_CATALOG,
    AgentDescriptor,
    AgentName,
    agent_descriptor,
    agent_names,
)
from pleaseai_lint.agents.writers import AgentHandle, create_agent

__all__ = [
    "AGENT_CATALOG",
    "AgentDescriptor",
    "AgentHandle",
    "AgentName",
    "agent_descriptor",
    "agent_names",
    "create_agent",
]
