"""Setup configuration for Supplier Directory package."""

from setuptools import setup, find_namespace_packages

setup(
    name="supplier-directory",
    version="1.0.0",
    description="Moving-industry supplier directory: listing client, selections, submissions and API",
    author="Alex",
    author_email="",
    packages=find_namespace_packages(include=["src*", "api*", "config*", "scripts*"]),
    package_data={"config": ["*.yaml"]},
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "requests>=2.31.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "directory-init=scripts.init_database:main",
        ],
    },
)
