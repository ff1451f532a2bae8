from setuptools import setup, find_packages

setup(
    name="vibeswipe_backend",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "pydantic>=2.0",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "vibeswipe-api=vibeswipe.main:run",
            "vibeswipe-preview-feed=vibeswipe.scripts.preview_feed:main",
        ],
    },
    python_requires=">=3.9",
)
