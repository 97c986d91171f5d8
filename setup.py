from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="video_annotate_tool",
    version="0.1.0",
    author="Video Annotate Tool Team",
    author_email="developer@example.com",
    description="Command-line client for the Google Cloud Video Intelligence API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "google-cloud-videointelligence>=2.11.0",
        "typer>=0.9.0",
        "rich>=13.4.0",
        "pydantic>=2.4.0",
        "structlog>=23.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "video-annotate=video_annotate_tool.cli:app",
        ],
    },
)
