from setuptools import find_packages, setup

setup(
    name="conlinks",
    version="0.1.0",
    description="Include/exclude path rules for consistent attachments and links in note vaults",
    packages=find_packages(include=["conlinks", "conlinks.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Settings model and command output schemas
        "typer>=0.12",  # CLI
        "click>=8.2",  # Lower bound for typer releases that still depend on click (CliRunner splits stderr)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "conlinks=conlinks.cli:main",
        ],
    },
)
