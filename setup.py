from setuptools import find_packages, setup

setup(
    name="svcinstall",
    version="0.1.0",
    description="Install and remove a binary as a systemd service with rsyslog and logrotate wiring",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Descriptor and config file validation
        "typer<0.26",  # CLI (0.26+ vendors click; code uses the click package directly)
        "click",  # Typer's underlying CLI framework (context access)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "svcinstall=svcinstall.cli:main",
        ],
    },
)
