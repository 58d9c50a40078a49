"""Shared fixtures for projmanip tests."""

import copy
import json
import pytest
from pathlib import Path

PACKAGE_JSON = {
    "name": "pnc-example",
    "version": "2.0.0-BUILD-NUMBER",
    "description": "Example package",
    "main": "index.js",
    "scripts": {"test": "grunt test"},
    "dependencies": {
        "archiver": "^1.0.0",
        "cors": "2.7.0",
        "express": "4.16.3",
        "express-bunyan-logger": "^1.3.0",
        "keycloak-admin-client": "^0.11.0"
    },
    "devDependencies": {
        "deep-equal": "~1.0.1",
        "express": "4.16.3",
        "grunt": "~1.0.0",
        "grunt-fh-build": "~1.0.0",
        "istanbul": "0.4.5"
    },
    "license": "Apache-2.0"
}


@pytest.fixture
def package_data():
    """A fresh copy of the example package.json document."""
    return copy.deepcopy(PACKAGE_JSON)


@pytest.fixture
def write_package(package_data):
    """Writes a package.json into a directory; the example document unless data is given."""
    def _write(directory, data=None):
        path = Path(directory) / "package.json"
        path.write_text(json.dumps(package_data if data is None else data, indent=2))
        return path
    return _write
