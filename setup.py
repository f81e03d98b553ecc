#!/usr/bin/env python3
"""
Setup script for the charge point E2E suite.

Install with `pip install -e .[test]`, then run `playwright install chromium`
once to download the browser.
"""

import sys

if sys.version_info < (3, 11):
    sys.exit("Error: chargepoint-e2e requires Python 3.11 or higher.")

try:
    from setuptools import setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Try to read version from __version__.py for consistency
try:
    import re
    from pathlib import Path

    version_file = Path(__file__).parent / "src" / "chargepoint_e2e" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

# Core dependencies
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
    "requests>=2.31.0",
]

# Test and development dependencies
test_requires = [
    "pytest>=8.0.0",
    "pytest-asyncio>=0.24.0",
]

extras_require = {
    "test": test_requires,
    "dev": test_requires + [
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
        "pytest-cov>=4.1.0",
    ],
}

setup(
    name="chargepoint-e2e",
    version=version,
    description="End-to-end tests for the charge point management app",
    author="Charge Point QA Team",
    license="MIT",
    python_requires=">=3.11",
    packages=["chargepoint_e2e"],
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["e2e", "playwright", "charge point", "testing"],
)
