"""Ollama availability checks.

Used before starting an agent run so the CLI can fail with a clear message
instead of a connection traceback.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)


class OllamaHealthCheck:
    """Check that an Ollama server is up and has a model pulled.

    Attributes:
        base_url: Base URL of the Ollama server.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _list_models(self) -> list[str] | None:
        """Model names from /api/tags, or None if the server did not answer."""
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/api/tags",
                    timeout=self.timeout,
                )
        except httpx.ConnectError:
            logger.debug(f"Could not connect to Ollama at {self.base_url}")
            return None
        except httpx.TimeoutException:
            logger.debug(f"Timeout connecting to Ollama at {self.base_url}")
            return None
        except httpx.RequestError as e:
            logger.debug(f"Request error checking Ollama: {e}")
            return None

        if response.status_code != 200:
            logger.debug(f"Ollama server returned status {response.status_code}")
            return None

        try:
            models = response.json().get("models", [])
            return [m.get("name", "") for m in models if m.get("name")]
        except (ValueError, AttributeError, TypeError) as e:
            logger.debug(f"Error parsing Ollama model list: {e}")
            return []

    async def is_available(self) -> bool:
        """True if the server answers /api/tags with 200."""
        return await self._list_models() is not None

    async def has_model(self, model_name: str) -> bool:
        """True if ``model_name`` (or ``model_name:<tag>``) is installed."""
        models = await self._list_models()
        if not models:
            return False
        for name in models:
            if name == model_name or name.startswith(f"{model_name}:"):
                logger.debug(f"Found model: {name}")
                return True
        logger.debug(f"Model '{model_name}' not found in available models")
        return False

    async def get_available_models(self) -> list[str]:
        return await self._list_models() or []


def check_ollama_sync(
    base_url: str = "http://localhost:11434",
    model_name: str | None = None,
) -> tuple[bool, str]:
    """Synchronous readiness check for CLI use.

    Returns:
        ``(ready, message)``.
    """

    async def _check() -> tuple[bool, str]:
        health = OllamaHealthCheck(base_url=base_url)

        if not await health.is_available():
            return False, f"Ollama server not available at {base_url}"

        if model_name and not await health.has_model(model_name):
            models = await health.get_available_models()
            if models:
                return False, (
                    f"Model '{model_name}' not found. "
                    f"Available models: {', '.join(models)}. "
                    f"Run: ollama pull {model_name}"
                )
            return False, f"Model '{model_name}' not found. Run: ollama pull {model_name}"

        return True, "Ollama ready"

    return asyncio.run(_check())
