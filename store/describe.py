"""Product description generation through the Gemini REST API.

Generation is optional enrichment with fail-open semantics: a missing API key,
network errors and unusable responses all produce a readable fallback string
instead of an exception. Cancelling the awaiting task still cancels the call.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import StoreConfig

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "AI generation unavailable: Missing API Key."
EMPTY_RESPONSE_MESSAGE = "Could not generate description."
ERROR_MESSAGE = "Error generating description. Please try again."

PROMPT_TEMPLATE = """
Write a compelling, marketing-focused product description for a digital store.
Product Name: {product_name}
Category: {category_name}
Keywords/Features: {keywords}

Keep it under 300 characters. Make it sound professional and exciting for a gamer or tech enthusiast.
Do not use markdown formatting. Just plain text.
"""


def build_prompt(product_name: str, category_name: str, keywords: str) -> str:
    return PROMPT_TEMPLATE.format(
        product_name=product_name,
        category_name=category_name,
        keywords=keywords,
    ).strip()


def extract_text(payload: dict[str, Any]) -> str:
    """Join the text parts of the first candidate in a generateContent response."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts).strip()


class DescriptionGenerator:
    """Async client for one-shot description generation.

    Args:
        config: Store configuration (api_key, model, endpoint, timeout).
        client: Optional pre-built httpx.AsyncClient, e.g. with a mock transport.
            A client passed in is not closed by aclose().
    """

    def __init__(
        self, config: StoreConfig | None = None, client: httpx.AsyncClient | None = None
    ) -> None:
        self._config = config or StoreConfig()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.generation_base_url,
                timeout=self._config.http_timeout,
            )
        return self._client

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self._config.api_key or "",
        }

    async def generate(self, product_name: str, category_name: str, keywords: str) -> str:
        """Return a short marketing description, or a fallback message."""
        if not self._config.api_key:
            logger.warning("No API key configured for description generation")
            return MISSING_KEY_MESSAGE

        body = {
            "contents": [
                {"parts": [{"text": build_prompt(product_name, category_name, keywords)}]}
            ]
        }

        try:
            response = await self._get_client().post(
                f"/v1beta/models/{self._config.model}:generateContent",
                json=body,
                headers=self._get_headers(),
            )
            response.raise_for_status()
            text = extract_text(response.json())
        except httpx.RequestError as e:
            logger.warning("Network error generating description: %s", e)
            return ERROR_MESSAGE
        except httpx.HTTPStatusError as e:
            logger.warning(
                "HTTP %d error generating description: %s", e.response.status_code, e
            )
            return ERROR_MESSAGE
        except (ValueError, AttributeError, TypeError) as e:
            logger.warning("Unreadable generation response: %s", e)
            return ERROR_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


async def generate_description(
    product_name: str,
    category_name: str,
    keywords: str,
    config: StoreConfig | None = None,
) -> str:
    """One-off generation with a short-lived client."""
    generator = DescriptionGenerator(config)
    try:
        return await generator.generate(product_name, category_name, keywords)
    finally:
        await generator.aclose()
