"""
Setup script for the korean_analyser package
"""

from setuptools import setup, find_packages
from pathlib import Path

# README as the long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="korean_analyser",
    version="0.1.0",
    author="Sergey",
    description="Configurable Korean morphological tokenization for search indexing and NLP pipelines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"korean_analyser": ["resources/userdict/*.txt"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: Korean",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.9",
    install_requires=[
        "kiwipiepy>=0.17.0",
        "pandas>=1.5.0",
        "openpyxl>=3.0.0",
        "pyyaml>=6.0",
        "python-dotenv>=0.19.0",
        "hanja>=0.15.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "flake8>=4.0",
        ],
        "test": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
