# fixtures.py

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict
from urllib.parse import quote

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Room for the ".json" suffix within the usual 255 byte file name limit
MAX_NAME_LENGTH = 200


class FixtureNotFound(KeyError):
    pass


class FixtureStore:
    """Captured API payloads, one JSON file per `<kind>/<key>`.

    Keys are IRIs or search strings, so they are URL-encoded into file names.
    Encoded keys too long for a file name are replaced by their SHA-256 digest.
    """

    def __init__(self, root):
        self.root = Path(root)

    def path_for(self, kind: str, key: str) -> Path:
        name = quote(key, safe="")
        if len(name) > MAX_NAME_LENGTH:
            name = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.root / kind / f"{name}.json"

    def load(self, kind: str, key: str) -> Dict[str, Any]:
        path = self.path_for(kind, key)
        if not path.is_file():
            raise FixtureNotFound(f"No {kind} fixture for {key}")
        logger.debug("Loading fixture %s", path)
        with path.open(encoding="utf-8") as f:
            return json.load(f)

    def save(self, kind: str, key: str, payload: Dict[str, Any]) -> Path:
        path = self.path_for(kind, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.debug("Saved fixture %s", path)
        return path


def get_fixture_store() -> FixtureStore:
    root = os.getenv("KNORA_FIXTURE_DIR")
    if not root:
        raise ValueError("Environment variable not set: KNORA_FIXTURE_DIR")
    return FixtureStore(root)
