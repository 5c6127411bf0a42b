import os
import socket
import tempfile
from pathlib import Path

import pytest

# Must be set before scaffold.main builds its configuration.
_RUNTIME_DIR = Path(tempfile.mkdtemp(prefix="scaffold-tests-"))
os.environ.setdefault("LOGS_DIR", str(_RUNTIME_DIR / "logs"))
os.environ.setdefault("STATIC_DIR", str(_RUNTIME_DIR / "public"))


@pytest.fixture
def static_dir() -> Path:
    return Path(os.environ["STATIC_DIR"])


@pytest.fixture
def logs_dir() -> Path:
    return Path(os.environ["LOGS_DIR"])


@pytest.fixture
def closed_port() -> int:
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
