import re

import pytest
from aioresponses import aioresponses
from loguru import logger

from modgrab.models import ClientConfig
from modgrab.services import ModrinthClient

BASE = "https://api.modrinth.com/v2"
SEARCH_URL = re.compile(r"^https://api\.modrinth\.com/v2/search(\?.*)?$")


def release(game_versions, loaders, filenames, dependencies=None):
    """Build a /project/{id}/version entry."""
    data = {
        "game_versions": game_versions,
        "loaders": loaders,
        "files": [
            {"url": f"https://cdn.modrinth.com/data/x/{name}", "filename": name}
            for name in filenames
        ],
    }
    if dependencies is not None:
        data["dependencies"] = dependencies
    return data


def find_call(mocked, path):
    for (method, url), calls in mocked.requests.items():
        if url.path == path:
            return calls[0]
    raise AssertionError(f"no request to {path}")


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


@pytest.fixture
def mocked():
    with aioresponses() as m:
        yield m


@pytest.fixture
async def client():
    c = ModrinthClient(ClientConfig())
    yield c
    await c.close()


SODIUM_URL = "https://cdn.modrinth.com/data/x/sodium-fabric-1.20.1.jar"


def mock_sodium(mocked, dependencies=None, hits=None):
    """Register the search / version / file responses for the sodium scenario."""
    if hits is None:
        hits = [{"project_id": "AANobbMI", "title": "Sodium"}]
    mocked.get(SEARCH_URL, payload={"hits": hits})
    mocked.get(
        f"{BASE}/project/AANobbMI/version",
        payload=[
            release(
                ["1.20.1"],
                ["fabric"],
                ["sodium-fabric-1.20.1.jar"],
                dependencies=dependencies,
            )
        ],
    )
    mocked.get(SODIUM_URL, body=b"sodium-jar")


SODIUM_DEPENDENCIES = [
    {"project_id": "P7dR8mSH", "dependency_type": "required"},
    {"project_id": "mOgUt4GM", "dependency_type": "optional"},
]


def mock_dependency_titles(mocked):
    mocked.get(f"{BASE}/project/P7dR8mSH", payload={"title": "Fabric API"})
    mocked.get(f"{BASE}/project/mOgUt4GM", payload={"title": "Mod Menu"})
