"""Posting collaborators that publish generated text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from .config import PosterConfig
from .errors import ConfigError, PostingError
from .logging import get_logger

LOGGER = get_logger(__name__)

STATUS_ENDPOINT = "/api/v1/statuses"


@dataclass
class PostReceipt:
    status_id: Optional[str]
    url: Optional[str]
    text: str


class Poster(Protocol):
    def post(self, text: str) -> PostReceipt:
        ...


class DryRunPoster:
    """Record statuses instead of publishing them."""

    def __init__(self) -> None:
        self.posted: list[str] = []

    def post(self, text: str) -> PostReceipt:
        self.posted.append(text)
        LOGGER.info("Dry run, not posting: %s", text)
        return PostReceipt(status_id=None, url=None, text=text)


class StatusPoster:
    """Publish statuses to a Mastodon-compatible ``/api/v1/statuses`` endpoint."""

    def __init__(self, config: PosterConfig, session: Optional[requests.Session] = None) -> None:
        if not config.base_url:
            raise ConfigError("poster.base_url is required to post statuses")
        if not config.access_token:
            raise ConfigError("poster.access_token is required to post statuses")
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {config.access_token}"})

    @property
    def endpoint(self) -> str:
        return f"{str(self.config.base_url).rstrip('/')}{STATUS_ENDPOINT}"

    def post(self, text: str) -> PostReceipt:
        try:
            response = self.session.post(self.endpoint, data={"status": text}, timeout=self.config.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise PostingError(f"Posting to {self.endpoint} failed: {exc}") from exc
        except ValueError as exc:
            raise PostingError(f"Unreadable response from {self.endpoint}: {exc}") from exc
        if not isinstance(payload, dict):
            payload = {}
        receipt = PostReceipt(
            status_id=str(payload["id"]) if payload.get("id") is not None else None,
            url=payload.get("url"),
            text=text,
        )
        LOGGER.info("Posted status %s", receipt.status_id)
        return receipt


def create_poster(config: PosterConfig, session: Optional[requests.Session] = None) -> Poster:
    if config.dry_run:
        return DryRunPoster()
    return StatusPoster(config, session=session)


__all__ = ["DryRunPoster", "PostReceipt", "Poster", "StatusPoster", "create_poster"]
