#!/usr/bin/env python3
"""
Setup script for the Nearby News service.

Location-aware news sharing: clients post short news items at a position and
query the items published within a radius of where they are.
"""

import os

from setuptools import find_packages, setup


# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return ""


# Read requirements from requirements.txt
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), "requirements.txt")
    if os.path.exists(req_path):
        with open(req_path, "r", encoding="utf-8") as f:
            return [
                line.strip()
                for line in f
                if line.strip() and not line.strip().startswith("#")
            ]
    return [
        "fastapi>=0.115.0",
        "uvicorn[standard]>=0.30.0",
        "pydantic>=2.11.7",
        "pydantic-settings>=2.10.1",
        "motor>=3.5.0",
        "pymongo>=4.8.0",
        "dependency-injector>=4.46.0",
        "apscheduler>=3.10.4,<4",
        "aiofiles>=24.1.0",
        "colorama>=0.4.6",
        "python-multipart>=0.0.9",
    ]


setup(
    name="nearby-news",
    version="0.1.0",
    description="Location-aware news sharing service with radius search",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["common", "common.*", "nearby_news", "nearby_news.*"]),
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=8.4.1",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.28.1",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nearby-news=nearby_news.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: FastAPI",
    ],
    include_package_data=True,
    zip_safe=False,
)
