"""
Profile Image Loading

Resolves a profile image source to a data URI so it can be embedded in a
standalone page. Any failure yields None and the caller shows the initial-letter
badge instead; nothing here raises.
"""

import base64
import mimetypes
import os
from pathlib import Path
from typing import Optional

import httpx
from dotenv import load_dotenv

from vitae.contexts.rendering.logger import log_image_fallback

load_dotenv()
IMAGE_TIMEOUT_S = float(os.getenv("VITAE_IMAGE_TIMEOUT_S", "5"))

DEFAULT_MIME_TYPE = "image/png"


def _to_data_uri(content: bytes, mime_type: Optional[str]) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def load_profile_image(
    src: Optional[str], client: httpx.Client = None, timeout: float = None
) -> Optional[str]:
    """
    Load a profile image as a data URI.

    Args:
        src: data: URI, http(s) URL or local file path
        client: httpx client for remote images (a short-lived one is created if None)
        timeout: Remote request timeout in seconds. Defaults to VITAE_IMAGE_TIMEOUT_S

    Returns:
        Data URI, or None if the source is empty or cannot be loaded

    Example:
        >>> load_profile_image("data:image/png;base64,iVBORw0KGgo=")
        'data:image/png;base64,iVBORw0KGgo='
        >>> load_profile_image("/does/not/exist.png") is None
        True
    """
    if not src:
        return None

    if src.startswith("data:"):
        return src

    if src.startswith(("http://", "https://")):
        return _load_remote_image(src, client, timeout if timeout is not None else IMAGE_TIMEOUT_S)

    try:
        path = Path(src).expanduser()
        if not path.is_file():
            log_image_fallback(src, "file not found")
            return None
        content = path.read_bytes()
    except (OSError, RuntimeError, ValueError) as e:
        log_image_fallback(src, f"{type(e).__name__}: {e}")
        return None

    mime_type, _ = mimetypes.guess_type(path.name)
    return _to_data_uri(content, mime_type)


def _load_remote_image(url: str, client: Optional[httpx.Client], timeout: float) -> Optional[str]:
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned_client:
                response = owned_client.get(url)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        log_image_fallback(url, f"{type(e).__name__}: {e}")
        return None

    mime_type = response.headers.get("content-type", "").split(";")[0].strip()
    if not mime_type.startswith("image/"):
        log_image_fallback(url, f"unexpected content type {mime_type or '(none)'}")
        return None

    return _to_data_uri(response.content, mime_type)
