from setuptools import setup

APP_NAME = "sitemap-writer"
MODULES = ["sitemap_entries", "sitemap_errors", "sitemap_generator"]
VERSION = "0.1.0"

setup(
    name=APP_NAME,
    version=VERSION,
    description="Generate XML sitemaps and sitemap indexes from lists of URL records",
    license="MIT",
    py_modules=MODULES,
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
