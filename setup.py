from setuptools import find_packages, setup


setup(
    name="vocalware-client",
    version="0.1.0",
    description="Client for the Vocalware text-to-speech REST API.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "httpx>=0.27",
        "structlog>=24.1",
        "rich>=13.7",
        "typer>=0.12",
    ],
    extras_require={
        "dev": ["pytest>=8.0", "pytest-asyncio>=0.23", "ruff>=0.6", "mypy>=1.8"],
    },
    entry_points={"console_scripts": ["vocalware=vocalware.cli:app"]},
)
