"""Setup configuration for the PW training suite."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = (
    readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""
)

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="pw-training-suite",
    version="0.1.0",
    description="Playwright for Python training suites with page objects, fixtures and environment presets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="PW Training Suite Team",
    python_requires=">=3.8",
    packages=find_packages(include=["pwsuite", "pwsuite.*"]),
    package_data={"pwsuite": ["templates/*.html"]},
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pwsuite=pwsuite.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Quality Assurance",
    ],
)
