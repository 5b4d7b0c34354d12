"""
TCGINDEX Configuration Service
"""

import configparser
import logging
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants
from .errors import ConfigurationError


@singleton
class TcgindexConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    tcgindex_version: str
    data_path: pathlib.Path
    sets_file_name: str
    cards_directory_name: str
    prefix_cap: int
    generate_hashes: bool
    pretty_print: bool
    parallel_loading: bool
    pool_size: int

    def __init__(self, config_path: pathlib.Path = constants.CONFIG_PATH):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.__load_config_from_local_file(config_path)

        self.tcgindex_version = self.get(
            "TCGINDEX", "version", fallback="NO_VERSION_FOUND"
        )

        self.data_path = self.__resolve_data_path()
        self.sets_file_name = self.get("Paths", "sets_file", "sets/sets.json")
        self.cards_directory_name = self.get("Paths", "cards_directory", "cards")
        self._output_path: Optional[pathlib.Path] = (
            pathlib.Path(constants.ENV_OUT_PATH).expanduser().resolve()
            if constants.ENV_OUT_PATH
            else None
        )

        self.prefix_cap = self.get_int(
            "Index", "prefix_cap", constants.DEFAULT_PREFIX_CAP
        )
        if self.prefix_cap < 1:
            raise ConfigurationError(
                "Index", "prefix_cap", f"must be a positive integer, not {self.prefix_cap}"
            )
        self.generate_hashes = self.get_boolean("Index", "generate_hashes", True)
        self.pretty_print = self.get_boolean("Index", "pretty_print", False)
        self.parallel_loading = self.get_boolean("Index", "parallel_loading", False)
        self.pool_size = self.get_int("Index", "pool_size", 32)

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as TCGINDEX configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(
                f"{file_path.name} was not found ({file_path}), using built-in defaults"
            )
            return

        self.logger.info(f"Loading configuration from {file_path}")
        try:
            self.config_parser.read(str(file_path), encoding="utf-8")
        except configparser.Error as error:
            raise ConfigurationError("*", str(file_path), str(error)) from error

    def __resolve_data_path(self) -> pathlib.Path:
        """
        Environment variable beats the properties file, which beats ./public/data
        :return Absolute data path
        """
        if constants.ENV_DATA_PATH:
            return pathlib.Path(constants.ENV_DATA_PATH).expanduser().resolve()

        configured = self.get("Paths", "data_path")
        if configured:
            return pathlib.Path(configured).expanduser().resolve()

        return constants.DEFAULT_DATA_PATH

    @property
    def sets_file(self) -> pathlib.Path:
        """
        Location of the set catalog
        """
        return self.data_path.joinpath(self.sets_file_name)

    @property
    def cards_directory(self) -> pathlib.Path:
        """
        Directory holding one <set id>.json card file per set
        """
        return self.data_path.joinpath(self.cards_directory_name)

    @property
    def output_path(self) -> pathlib.Path:
        """
        Directory the index artifacts get published to
        """
        if self._output_path:
            return self._output_path
        return self.data_path.joinpath(self.get("Paths", "output_path", "indexes"))

    @output_path.setter
    def output_path(self, value: pathlib.Path) -> None:
        self._output_path = pathlib.Path(value).expanduser().resolve()

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if not self.has_option(section, option):
            return fallback

        try:
            return self.config_parser.getint(section, option)
        except ValueError as error:
            raise ConfigurationError(section, option, str(error)) from error

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if not self.has_option(section, option):
            return fallback

        try:
            return self.config_parser.getboolean(section, option)
        except ValueError as error:
            raise ConfigurationError(section, option, str(error)) from error

    def has_section(self, section: str) -> bool:
        """
        Check if Configuration has a specific section
        :param section: Section header to find
        :return Does Section header exist
        """
        return self.config_parser.has_section(section)

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
