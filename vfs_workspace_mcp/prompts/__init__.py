"""Prompt texts served to the agent."""

from .system import get_prompts as get_system_prompts

AGENT_SYSTEM_PROMPT = "agent-system-prompt"


def get_all_prompts() -> dict[str, str]:
    """Merges the prompt components of every prompt module."""
    prompts: dict[str, str] = {}
    prompts.update(get_system_prompts())
    return prompts


def get_prompt(name: str = AGENT_SYSTEM_PROMPT) -> str:
    """Returns one prompt by name; raises KeyError for unknown names."""
    return get_all_prompts()[name]
