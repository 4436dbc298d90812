from setuptools import setup, find_packages

setup(
    name="helpgrid",
    version="0.1.0",
    description="Colorized, column-aligned help text for command-line tools",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest", "click"],
    },
    entry_points={
        "console_scripts": [
            "helpgrid=helpgrid.cli:app",
        ],
    },
    python_requires=">=3.10",
)
