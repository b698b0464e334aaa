import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from main import app
from services.catalog import Catalog, get_catalog


def parse_link_header(header: str) -> dict:
    """Split a Link header into ``{rel: {"url": ..., "page": ..., "per_page": ...}}``."""
    links = {}
    for part in header.split(", "):
        segments = part.split("; ")
        url = segments[0].strip("<>")
        params = {}
        for segment in segments[1:]:
            key, value = segment.split("=", 1)
            params[key] = value.strip('"')
        links[params.pop("rel")] = {"url": url, **params}
    return links


@pytest.fixture
def small_catalog():
    return Catalog(size=25)


@pytest_asyncio.fixture
async def client(small_catalog):
    app.dependency_overrides[get_catalog] = lambda: small_catalog
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_catalog, None)
