"""Setup configuration for resilient-http."""

from setuptools import setup, find_packages

setup(
    name="resilient-http",
    version="0.1.0",
    description="HTTP transport with bounded retry, exponential backoff and jitter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.12",
    install_requires=[
        "requests>=2.31.0",
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "resilient-http=resilient_http.cli:main",
        ],
    },
)
