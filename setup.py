from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Read `__version__` without importing the package (its deps may be missing)."""

    text = (ROOT / "src" / "helloguid" / "_version.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = [\"']([^\"']+)[\"']", text, re.M)
    if match is None:
        raise RuntimeError("Cannot find __version__ in src/helloguid/_version.py")
    return match.group(1)


setup(
    name="helloguid",
    version=_read_version(),
    description="Persistent hello world: a name -> GUID registry server with console, web and HTTP clients",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"helloguid._frontend": ["dist/*.html"]},
    include_package_data=True,
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.29",
        "httpx>=0.27",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
    entry_points={
        "console_scripts": [
            "helloguid=helloguid.__main__:main",
        ],
    },
)
