"""Shared test fixtures for UI Adoption Tracker tests."""

import json

import pytest

from ui_adoption.config import TrackerConfig
from ui_adoption.models import Category, FileRecord


TARGET_SOURCE = """import React from 'react';
import Button from '@mui/material/Button';

export const Save = () => <Button>Save</Button>;
"""

LEGACY_SOURCE = """import React from 'react';
import { Modal } from 'react-bootstrap';
import Select from 'react-select';
"""

MIXED_SOURCE = """import Modal from 'legacy-lib/Modal';
import Dialog from '@mui/material/Dialog';
"""

PLAIN_SOURCE = """export const add = (a, b) => a + b;
"""


def write_file(root, rel_path, content):
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def frontend_repo(tmp_path):
    """A small monorepo with one file per category plus ignored files."""
    root = tmp_path / "frontend"
    root.mkdir()
    (root / "package.json").write_text("{}", encoding="utf-8")
    write_file(root, "packages/components/src/Save.tsx", TARGET_SOURCE)
    write_file(root, "packages/components/src/OldModal.jsx", LEGACY_SOURCE)
    write_file(root, "packages/modules/src/Mixed.js", MIXED_SOURCE)
    write_file(root, "packages/modules/src/utils/math.ts", PLAIN_SOURCE)
    write_file(root, "packages/modules/src/Save.test.tsx", TARGET_SOURCE)
    write_file(root, "packages/modules/src/types.d.ts", PLAIN_SOURCE)
    write_file(root, "packages/modules/src/README.md", "# docs")
    write_file(root, "packages/other/src/Outside.tsx", TARGET_SOURCE)
    return root


@pytest.fixture
def config(frontend_repo):
    """Config pointing at ``frontend_repo`` with a small test legacy list."""
    return TrackerConfig(
        source_repo_path=str(frontend_repo),
        legacy_libraries=("react-bootstrap", "react-select", "legacy-lib"),
    )


@pytest.fixture
def data_home(tmp_path, monkeypatch):
    """Isolated data directory selected through UI_ADOPTION_HOME."""
    home = tmp_path / "data"
    home.mkdir()
    monkeypatch.setenv("UI_ADOPTION_HOME", str(home))
    return home


@pytest.fixture
def configured_home(data_home, frontend_repo):
    """Data directory with a config.json pointing at ``frontend_repo``."""
    (data_home / "config.json").write_text(
        json.dumps(
            {
                "source_repo_path": str(frontend_repo),
                "legacy_libraries": ["react-bootstrap", "react-select", "legacy-lib"],
            }
        ),
        encoding="utf-8",
    )
    return data_home


def _make_record(path, category, author=None, legacy=(), target=(), module="components"):
    return FileRecord(
        path=path,
        category=category,
        module=module,
        legacy_dependencies=tuple(legacy),
        target_dependencies=tuple(target),
        author=author,
    )


@pytest.fixture
def sample_records():
    """Records covering every category, authored by two engineers."""
    return [
        _make_record(
            "packages/components/src/A.tsx",
            Category.TARGET,
            author="alice",
            target=["@mui/material/Button"],
        ),
        _make_record(
            "packages/components/src/B.tsx",
            Category.LEGACY,
            author="bob",
            legacy=["react-bootstrap", "react-select"],
        ),
        _make_record(
            "packages/modules/src/C.tsx",
            Category.MIXED,
            author="alice",
            legacy=["react-select"],
            target=["@mui/material"],
            module="modules",
        ),
        _make_record("packages/modules/src/D.ts", Category.NO_UI, author="bob", module="modules"),
        _make_record(
            "packages/modules/src/E.tsx",
            Category.TARGET,
            author="bob",
            target=["@mui/material/Dialog", "@mui/material/Button"],
            module="modules",
        ),
    ]


@pytest.fixture
def make_record():
    """Factory for FileRecords with sensible defaults."""
    return _make_record
