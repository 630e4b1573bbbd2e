from setuptools import find_packages, setup

setup(
    name="gazette-matcher",
    version="0.1.0",
    python_requires=">=3.10",
    packages=find_packages(include=["gazette_matcher", "gazette_matcher.*"]),
    install_requires=[
        "click",
        "fastapi",
        "numpy",
        "openpyxl",
        "pandas",
        "pypdf",
        "python-dotenv",
        "python-multipart",
        "rapidfuzz",
        "rich",
        "uvicorn",
    ],
    extras_require={"dev": ["httpx", "pytest"]},
    entry_points={
        "console_scripts": [
            "gazette-matcher=gazette_matcher.cli.main:cli",
        ],
    },
)
