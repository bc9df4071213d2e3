"""pydantic-ai agent that plans video walls with the calculator tool.

The agent talks to a local Ollama server through its OpenAI-compatible API
and answers free-text questions by calling ``video_wall_calculate``.

Example:
    >>> from videowall.infrastructure.llm import run_wall_agent_sync
    >>> print(run_wall_agent_sync("A 16:9 wall about 4 m wide, 1:1 cabinets"))
"""

from __future__ import annotations

import asyncio
import logging

from pydantic_ai import Agent, Tool
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from videowall.application.config import DEFAULT_LLM_MODEL, DEFAULT_OLLAMA_URL
from videowall.infrastructure.llm.prompts import WALL_SYSTEM_PROMPT, build_catalog_prompt
from videowall.infrastructure.llm.tools import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    video_wall_calculate,
)

logger = logging.getLogger(__name__)


def _create_ollama_model(model_name: str, ollama_url: str) -> OpenAIChatModel:
    """Chat model backed by Ollama's OpenAI-compatible endpoint."""
    if model_name.startswith("ollama:"):
        model_name = model_name[len("ollama:"):]

    base_url = ollama_url.rstrip("/")
    if not base_url.endswith("/v1"):
        base_url = f"{base_url}/v1"

    # Ollama ignores the key but the provider requires one
    provider = OpenAIProvider(base_url=base_url, api_key="ollama")
    return OpenAIChatModel(model_name, provider=provider)


def create_wall_agent(
    model: str | Model = DEFAULT_LLM_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
) -> Agent[None, str]:
    """Create an agent with the ``video_wall_calculate`` tool registered.

    Args:
        model: Ollama model name, or a ready pydantic-ai model instance.
        ollama_url: Ollama server URL, used when ``model`` is a name.
    """
    model_instance = (
        _create_ollama_model(model, ollama_url) if isinstance(model, str) else model
    )

    agent: Agent[None, str] = Agent(
        model_instance,
        output_type=str,
        system_prompt=WALL_SYSTEM_PROMPT,
        tools=[
            Tool(
                video_wall_calculate,
                takes_ctx=False,
                name=TOOL_NAME,
                description=TOOL_DESCRIPTION,
            )
        ],
    )

    @agent.system_prompt
    def add_catalog() -> str:
        return build_catalog_prompt()

    return agent


async def run_wall_agent(
    prompt: str,
    model: str | Model = DEFAULT_LLM_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
    agent: Agent[None, str] | None = None,
) -> str:
    """Answer a wall planning question.

    Raises:
        pydantic_ai.exceptions.UnexpectedModelBehavior: On unusable model output.
        httpx.RequestError: On network errors reaching Ollama.
    """
    if agent is None:
        agent = create_wall_agent(model=model, ollama_url=ollama_url)

    logger.debug(f"Running wall agent, prompt length {len(prompt)} chars")
    result = await agent.run(prompt)
    logger.debug(f"Wall agent answered with {len(result.output)} chars")
    return result.output


def run_wall_agent_sync(
    prompt: str,
    model: str | Model = DEFAULT_LLM_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
    timeout: float | None = None,
) -> str:
    """Synchronous wrapper for :func:`run_wall_agent`.

    Raises:
        asyncio.TimeoutError: If ``timeout`` seconds pass without an answer.
    """
    coro = run_wall_agent(prompt, model=model, ollama_url=ollama_url)
    if timeout is not None:
        coro = asyncio.wait_for(coro, timeout=timeout)
    return asyncio.run(coro)
