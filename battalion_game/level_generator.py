"""Natural-language level generation backed by Google Gemini."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Optional, Protocol

from battalion_game.core.grid import TileType
from battalion_game.core.levels import (
    DEFAULT_GRID_SIZE,
    create_default_level,
    normalize_level,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
API_KEY_VARIABLES = ("GEMINI_API_KEY", "API_KEY")


class LevelGenerationError(RuntimeError):
    """Raised when the generation service cannot produce a usable layout."""


class LayoutClient(Protocol):
    def request_layout(self, prompt: str) -> Optional[str]:
        """Return the raw JSON text produced for ``prompt``."""


def system_instruction(size: int = DEFAULT_GRID_SIZE) -> str:
    return (
        "You are a level designer for a grid-based tank battle game (like Battle City).\n"
        f"The grid is {size}x{size}.\n\n"
        "Tile Types:\n"
        f"{int(TileType.EMPTY)} = Empty (Passable)\n"
        f"{int(TileType.BRICK)} = Brick Wall (Destructible, blocks movement/bullets)\n"
        f"{int(TileType.STEEL)} = Steel Wall (Indestructible, blocks movement/bullets)\n"
        f"{int(TileType.WATER)} = Water (Blocks movement, allows bullets)\n"
        f"{int(TileType.GRASS)} = Grass (Visual cover)\n"
        f"{int(TileType.BASE)} = Base (The Eagle - MUST exist exactly once, usually at bottom center)\n\n"
        "Generate a 2D array representing the level layout based on the user's description.\n"
        "Ensure the base is protected by some walls.\n"
        "Ensure there are open paths for tanks to move.\n"
        "Do not fill the entire map; leave plenty of empty tiles."
    )


def resolve_api_key() -> Optional[str]:
    for name in API_KEY_VARIABLES:
        value = os.environ.get(name)
        if value:
            return value
    return None


class GeminiLayoutClient:
    """Thin wrapper around ``google-genai`` asking for a JSON ``layout`` grid."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        size: int = DEFAULT_GRID_SIZE,
    ) -> None:
        self.api_key = api_key or resolve_api_key()
        self.model = model
        self.size = size
        self._client: Any = None

    def _ensure_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self.api_key:
            raise LevelGenerationError("API key is missing")
        from google import genai

        self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _config(self) -> Any:
        from google.genai import types

        layout_schema = types.Schema(
            type=types.Type.OBJECT,
            properties={
                "layout": types.Schema(
                    type=types.Type.ARRAY,
                    items=types.Schema(
                        type=types.Type.ARRAY,
                        items=types.Schema(type=types.Type.INTEGER),
                    ),
                ),
            },
        )
        return types.GenerateContentConfig(
            system_instruction=system_instruction(self.size),
            response_mime_type="application/json",
            response_schema=layout_schema,
        )

    def request_layout(self, prompt: str) -> Optional[str]:
        client = self._ensure_client()
        response = client.models.generate_content(
            model=self.model,
            contents=f"Generate a level layout: {prompt}",
            config=self._config(),
        )
        return response.text


def parse_layout(text: Optional[str], size: int = DEFAULT_GRID_SIZE) -> List[List[int]]:
    """Decode the service's JSON answer into a normalized grid."""
    if not text:
        raise LevelGenerationError("No response from the level service")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LevelGenerationError(f"Malformed level JSON: {exc}") from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("layout"), list):
        raise LevelGenerationError("Response does not contain a layout array")
    return normalize_level(payload["layout"], size)


class LevelGenerator:
    """Turn a free-text description into a level grid.

    Never raises: every failure is logged and answered with the default
    level.
    """

    def __init__(
        self,
        client: Optional[LayoutClient] = None,
        *,
        size: int = DEFAULT_GRID_SIZE,
        model: str = DEFAULT_MODEL,
    ) -> None:
        self.size = size
        self.client = client or GeminiLayoutClient(model=model, size=size)
        self.last_error: Optional[str] = None

    def generate(self, prompt: str) -> List[List[int]]:
        self.last_error = None
        if not prompt or not prompt.strip():
            return create_default_level(self.size)
        try:
            text = self.client.request_layout(prompt.strip())
            grid = parse_layout(text, self.size)
        except Exception as exc:  # any service failure falls back to the default map
            self.last_error = str(exc) or exc.__class__.__name__
            logger.warning("Failed to generate level, using default: %s", self.last_error)
            return create_default_level(self.size)
        logger.debug("Generated level for prompt %r", prompt)
        return grid


__all__ = [
    "DEFAULT_MODEL",
    "GeminiLayoutClient",
    "LayoutClient",
    "LevelGenerationError",
    "LevelGenerator",
    "parse_layout",
    "resolve_api_key",
    "system_instruction",
]
