from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent
INIT = ROOT / "src" / "ekeys" / "__init__.py"


def _read_version() -> str:
    """Single-source the version from the package without importing it.

    Importing would pull in numpy/fastapi, which may not be installed yet at build time.
    """

    m = re.search(r'^__version__ = "([^"]+)"', INIT.read_text(encoding="utf-8"), re.MULTILINE)
    if m is None:
        raise RuntimeError(f"__version__ not found in {INIT}")
    return m.group(1)


setup(
    name="ekeys",
    version=_read_version(),
    description="Keyframe animation evaluator with cubic Bezier easing",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24",
        "fastapi>=0.100",
        "uvicorn>=0.23",
        "httpx>=0.24",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "ekeys=ekeys.__main__:main",
        ],
    },
)
