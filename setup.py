"""
Installation setup for tcgindex
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("tcgindex/resources/tcgindex.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))

setuptools.setup(
    name="tcgindex",
    version=config.get("TCGINDEX", "version", fallback="1.0.0+fallback"),
    description="Trading card catalog to client-side search index compiler",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Database",
        "Topic :: Text Processing :: Indexing",
    ],
    keywords=[
        "Autocomplete",
        "Card Games",
        "Collectible",
        "Inverted Index",
        "JSON",
        "Search",
        "Trading Cards",
    ],
    python_requires=">=3.10",
    include_package_data=True,
    package_data={"tcgindex": ["resources/*.properties"]},
    packages=setuptools.find_packages(include=["tcgindex", "tcgindex.*"]),
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["tcgindex=tcgindex.__main__:main"]},
)
