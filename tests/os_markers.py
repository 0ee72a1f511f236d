"""Platform markers shared by the test suite."""

from __future__ import annotations

import sys

import pytest

OS_AGNOSTIC = pytest.mark.os_agnostic
POSIX_ONLY = pytest.mark.skipif(sys.platform.startswith("win"), reason="syslog(3) is POSIX only")

__all__ = ["OS_AGNOSTIC", "POSIX_ONLY"]
