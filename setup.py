from setuptools import setup, find_packages

setup(
    name="pginfer",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Infer PostGraphile table metadata from GraphQL introspection",
    long_description = open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/pginfer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.28.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "httpx>=0.24.0",
        "cachetools>=5.3.0",
        "inflect>=7.0.0",
        "graphql-core>=3.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-asyncio>=0.21.0",
            "responses>=0.23.0",
        ],
    },
)
