"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import List

import pytest

from addlee.config import ConfigManager, get_config_manager
from addlee.profiles import Profile


@pytest.fixture
def spa_creator() -> Profile:
    """Creator whose description shares 'luxury' and 'spa' with spa_hotel."""
    return Profile(name="A", description="luxury spa wellness", tags=("Spa", "Wellness"))


@pytest.fixture
def spa_hotel() -> Profile:
    return Profile(name="B", description="luxury spa resort", tags=("Spa", "Luxury"))


@pytest.fixture
def disjoint_pair() -> List[Profile]:
    """Two profiles with nothing in common."""
    return [
        Profile(name="Alpha", description="mountain hiking trails", tags=("Outdoors",)),
        Profile(name="Beta", description="downtown nightclub scene", tags=("Nightlife",)),
    ]


@pytest.fixture
def profiles_file(tmp_path) -> Path:
    """JSON file holding two creator profiles, one of them sparse."""
    path = tmp_path / "creators.json"
    path.write_text(json.dumps([
        {
            "id": "x1",
            "name": "Nora Lind",
            "description": "Spa and wellness storyteller",
            "tags": ["Spa", "Wellness"],
            "engagement": "4.5%",
            "avatar": "NL"
        },
        {"name": "Sparse Creator"}
    ]))
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any ADDLEE_* variables inherited from the host environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch, clean_env):
    """Run with a fresh config manager rooted in an empty temp directory."""
    monkeypatch.chdir(tmp_path)
    if hasattr(get_config_manager, '_instance'):
        del get_config_manager._instance
    yield tmp_path
    if hasattr(get_config_manager, '_instance'):
        del get_config_manager._instance
