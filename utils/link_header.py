"""
RFC 5988 ``Link`` header construction for paginated collections.

https://tools.ietf.org/html/rfc5988
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from config.settings import settings
from models.link import LinkEntry, LinkRelation, LinkRequestContext
from utils.errors import InvalidPaginationParameter


# -----------------------------------------------------------------------------
# Query parameter parsing
# -----------------------------------------------------------------------------
def _parse_positive_int(parameter: str, raw: Optional[str], default: int) -> int:
    if raw is None:
        return default

    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        raise InvalidPaginationParameter(parameter, raw)

    try:
        number = int(value)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise InvalidPaginationParameter(parameter, raw) from None
    if number < 1:
        raise InvalidPaginationParameter(parameter, raw)
    return number


def parse_pagination_params(page: Optional[str], per_page: Optional[str]) -> Tuple[int, int]:
    """
    Coerce the raw ``page`` / ``per_page`` query values into integers.

    Missing values fall back to the configured defaults. Anything that is not
    a base-10 integer >= 1 raises InvalidPaginationParameter.
    """
    return (
        _parse_positive_int("page", page, settings.DEFAULT_PAGE),
        _parse_positive_int("per_page", per_page, settings.DEFAULT_PER_PAGE),
    )


# -----------------------------------------------------------------------------
# Link building
# -----------------------------------------------------------------------------
def _last_page(ctx: LinkRequestContext) -> int:
    return ctx.total_docs // ctx.limit + 1


def build_link(rel: LinkRelation, ctx: LinkRequestContext) -> LinkEntry:
    if rel == LinkRelation.FIRST:
        page = 1
    elif rel == LinkRelation.PREV:
        page = ctx.page - 1
    elif rel == LinkRelation.LAST:
        page = _last_page(ctx)
    else:
        page = ctx.page + 1

    return LinkEntry(
        rel=rel,
        url=f"{ctx.resource_url}?page={page}&per_page={ctx.limit}",
        page=page,
        per_page=ctx.limit,
    )


def format_link_header(links: Iterable[LinkEntry]) -> str:
    parts = []
    for link in links:
        parts.append(
            f'<{link.url}>; rel="{link.rel}"; per_page="{link.per_page}"; page="{link.page}"'
        )
    return ", ".join(parts)


def build_link_header(ctx: LinkRequestContext) -> str:
    """
    Build the ``Link`` header value for one page of a collection.

    ``first`` and ``last`` are always present. ``next`` is added while
    ``page <= total_docs // limit``, so a collection whose total is an exact
    multiple of ``limit`` still advertises one trailing empty page.
    ``prev`` is added for every page but the first. Pages past the end are
    not clamped.
    """
    if ctx.limit < 1:
        raise InvalidPaginationParameter("per_page", ctx.limit)

    has_next_page = ctx.page <= ctx.total_docs // ctx.limit
    is_first_page = ctx.page == 1

    links = [
        build_link(LinkRelation.FIRST, ctx),
        build_link(LinkRelation.LAST, ctx),
    ]
    if has_next_page:
        links.append(build_link(LinkRelation.NEXT, ctx))
    if not is_first_page:
        links.append(build_link(LinkRelation.PREV, ctx))

    return format_link_header(links)
