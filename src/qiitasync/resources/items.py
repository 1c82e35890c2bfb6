"""Item resource wrapper."""

from __future__ import annotations

from typing import Optional

from ..errors import DecodeError
from .base import Resource
from .items_types import Article


class Items(Resource):
    """Item (article) operations."""

    def create(self, article: Article, *, timeout: Optional[float] = None) -> Article:
        """Publish ``article`` as a new item.

        Parameters
        ----------
        article
            Article to publish. Only its body, tags, title and private flag
            are sent.
        timeout
            Request timeout in seconds.

        Returns
        -------
        Article
            The item as stored by the service, or an empty ``Article`` in
            dry-run mode.

        Raises
        ------
        DecodeError
            If the response is empty or is not an item object.
        """
        response = self._post("/items", json=article.to_payload(), timeout=timeout)
        if self._dry_run:
            return Article()
        if not isinstance(response, dict):
            self._logger.warning("Create item response was not an object: %r", response)
            raise DecodeError(
                "Create item response was not an item object",
                method="POST",
                url=self._client._build_url("/items"),
                stage="decode",
            )
        return Article.from_payload(response)

    def list_own(self, *, timeout: Optional[float] = None) -> list[Article]:
        """Fetch the authenticated user's items.

        Only the first page returned by the service is read.

        Parameters
        ----------
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[Article]
            Items in the order returned, or ``[]`` in dry-run mode.
        """
        response = self._get("/authenticated_user/items", timeout=timeout)
        if self._dry_run:
            return []
        if not isinstance(response, list):
            self._logger.warning("Authenticated user items response was not a list.")
            raise DecodeError(
                "Authenticated user items response was not a list",
                method="GET",
                url=self._client._build_url("/authenticated_user/items"),
                stage="decode",
            )
        return [Article.from_payload(item) for item in response]
