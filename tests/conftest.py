"""Shared fixtures for the html_tailwind test-suite.

Provides a recording loader standing in for the host's asset subsystem, a
style resolver, and isolation of the configuration singleton so user-level
overrides never leak into test runs.
"""

import logging
import sys
from pathlib import Path
from typing import List

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from html_tailwind.config import ConfigManager
from html_tailwind.core.style_resolver import StyleResolver

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class RecordingLoader:
    """In-memory ResourceLoader that records every handle request."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = data
        self.requests: List[str] = []

    def read_all_bytes(self) -> bytes:
        return self.data

    def load_resource(self, path: str) -> str:
        self.requests.append(path)
        return f"handle:{path}"


class FailingLoader(RecordingLoader):
    """Loader whose byte read always fails."""

    def read_all_bytes(self) -> bytes:
        raise OSError("disk on fire")


@pytest.fixture
def loader():
    return RecordingLoader()


@pytest.fixture
def resolver():
    return StyleResolver()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user overrides at an empty directory and reset the singleton."""
    monkeypatch.setenv("HTML_TAILWIND_CONFIG_DIR", str(tmp_path / "user-config"))
    monkeypatch.setenv("HTML_TAILWIND_LOG_DIR", str(tmp_path / "logs"))
    ConfigManager.reset()
    yield
    ConfigManager.reset()


SAMPLE_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<html>
  <head>
    <font src="fonts/FiraSans-Bold.ttf"/>
    <font name="mono" src="fonts/FiraMono.ttf"/>
  </head>
  <body>
    <div id="main" class="flex flex-col size-full items-center justify-center bg-[#1a2b3cff]">
      <p class="text-[#ffffff] mb-[8px]">Main menu</p>
      <img src="images/logo.png" class="w-[120px] h-[40px]"/>
      <button id="marker-main-exit" class="px-[12px] py-[4px] border border-[#ff0000]">Exit</button>
    </div>
  </body>
</html>
"""


@pytest.fixture
def sample_document() -> bytes:
    return SAMPLE_DOCUMENT
