from __future__ import annotations

import json
import logging
from typing import Any, Callable, Coroutine, Optional, Tuple

from fastapi import Query, Request, Response
from fastapi.routing import APIRoute

from models.link import LinkRequestContext
from utils.link_header import build_link_header, parse_pagination_params

logger = logging.getLogger("api.links")


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------
def pagination_params(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    per_page: Optional[str] = Query(None, description="Number of items per page"),
) -> Tuple[int, int]:
    """FastAPI dependency returning ``(page, per_page)`` as integers."""
    return parse_pagination_params(page, per_page)


def _read_total_docs(response: Response) -> Optional[int]:
    body = getattr(response, "body", None)
    if not body:
        return None
    if not response.headers.get("content-type", "").startswith("application/json"):
        return None

    try:
        payload = json.loads(body)
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None
    total_docs = payload.get("totalDocs")
    # bool is an int subclass
    if isinstance(total_docs, bool) or not isinstance(total_docs, int) or total_docs < 0:
        return None
    return total_docs


# -----------------------------------------------------------------------------
# Route class
# -----------------------------------------------------------------------------
class LinkHeaderRoute(APIRoute):
    """
    APIRoute that attaches an RFC 5988 ``Link`` header to successful
    paginated responses.

    Pagination parameters are validated before the endpoint runs. Once the
    endpoint has produced its response, ``totalDocs`` is read from the JSON
    payload and the header is set before the response leaves the router.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def link_header_route_handler(request: Request) -> Response:
            page, limit = parse_pagination_params(
                request.query_params.get("page"),
                request.query_params.get("per_page"),
            )
            resource_url = request.url.path

            response = await original_route_handler(request)

            if not 200 <= response.status_code < 300:
                return response

            total_docs = _read_total_docs(response)
            if total_docs is None:
                logger.warning("no valid totalDocs in response for %s, Link header skipped", resource_url)
                return response

            link_header = build_link_header(
                LinkRequestContext(
                    page=page,
                    limit=limit,
                    resource_url=resource_url,
                    total_docs=total_docs,
                )
            )
            logger.debug("Link for %s: %s", resource_url, link_header)
            response.headers["Link"] = link_header
            return response

        return link_header_route_handler
