"""Agent integration for the video wall calculator.

Exposes the calculator as the ``video_wall_calculate`` tool and wires it
into a pydantic-ai agent running against a local Ollama server.

Submodules:
    tools: Tool request model and handler
    prompts: System prompt and catalog description
    ollama_client: Health check for the Ollama server
    wall_agent: pydantic-ai agent definition and runners
"""

from __future__ import annotations

from .ollama_client import OllamaHealthCheck, check_ollama_sync
from .prompts import WALL_SYSTEM_PROMPT, build_catalog_prompt
from .tools import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    VideoWallToolRequest,
    handle_tool_request,
    video_wall_calculate,
)
from .wall_agent import create_wall_agent, run_wall_agent, run_wall_agent_sync

__all__ = [
    # Tool
    "TOOL_DESCRIPTION",
    "TOOL_NAME",
    "VideoWallToolRequest",
    "handle_tool_request",
    "video_wall_calculate",
    # Prompts
    "WALL_SYSTEM_PROMPT",
    "build_catalog_prompt",
    # Ollama client
    "OllamaHealthCheck",
    "check_ollama_sync",
    # Agent
    "create_wall_agent",
    "run_wall_agent",
    "run_wall_agent_sync",
]
