from pathlib import Path
from setuptools import find_packages, setup

README = Path(__file__).parent / "README.md"

setup(
    name="sitemapgen",
    version="1.0.0",
    description="Sitemap generator with caching, size limits and sitemap-index splitting",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"sitemapgen": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "Jinja2>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "sitemapgen=sitemapgen.cli:main",
        ],
    },
)
