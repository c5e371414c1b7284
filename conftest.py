"""
Root conftest.py for the contacts project.

Puts each service directory on sys.path so service packages import
without an editable install.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add service directories to sys.path.

    Each directory under services/ holds one importable service package.
    """
    services_dir = Path(__file__).parent / "services"

    for service_path in sorted(services_dir.iterdir()):
        if service_path.is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
