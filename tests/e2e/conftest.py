"""E2E test fixtures: real GitHub API through the gh CLI."""

import os
import shutil
import subprocess
import sys

import pytest


def _gh_authenticated() -> bool:
    gh = shutil.which("gh")
    if gh is None:
        return False
    result = subprocess.run([gh, "auth", "status"], capture_output=True, timeout=30)
    return result.returncode == 0


def pytest_collection_modifyitems(config, items):
    if os.environ.get("GH_STARRED_E2E") and _gh_authenticated():
        return
    skip = pytest.mark.skip(reason="set GH_STARRED_E2E=1 with an authenticated gh CLI")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def run_cli():
    """Run gh-starred in a subprocess and return the CompletedProcess."""

    def _run(*args, timeout=300):
        cmd = [sys.executable, "-m", "gh_starred.cli", *args]
        return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)

    return _run
