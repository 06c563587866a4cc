#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
User Settings
Loads and saves connection settings from config.ini
"""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config import (
    CLIENT_PROCESS_NAME,
    CONFIG_SECTION_LCU,
    CONFIG_SECTION_LIVE,
    GAME_PROCESS_NAME,
    LCU_API_TIMEOUT_S,
    LCU_LOCKFILE_ENV,
    LIVE_CLIENT_TIMEOUT_S,
)
from utils.core.logging import get_logger
from utils.core.paths import get_config_file_path

log = get_logger()


@dataclass
class Settings:
    """Connection settings for the LCU and the in-game API"""
    lockfile: Optional[str] = None
    force_lock_file: bool = False
    ca_bundle: Optional[str] = None
    client_process_name: str = CLIENT_PROCESS_NAME
    game_process_name: str = GAME_PROCESS_NAME
    timeout: float = LCU_API_TIMEOUT_S
    live_ca_bundle: Optional[str] = None
    live_timeout: float = LIVE_CLIENT_TIMEOUT_S
    path: Optional[Path] = None

    @property
    def verify(self):
        """Value for requests' ``verify``: a CA bundle path, or False for the self-signed cert"""
        return self.ca_bundle or False

    @property
    def live_verify(self):
        return self.live_ca_bundle or False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from config.ini, falling back to defaults

        The ``LCU_LOCKFILE`` environment variable overrides the configured lockfile.

        Args:
            path: Optional explicit config file path

        Returns:
            Settings instance (defaults if the file is missing or unreadable)
        """
        config_path = Path(path) if path else get_config_file_path()
        settings = cls(path=config_path)

        if config_path.exists():
            config = configparser.ConfigParser()
            try:
                config.read(config_path, encoding="utf-8")
            except configparser.Error as e:
                log.warning(f"Failed to read config file {config_path}: {e}")
                config = configparser.ConfigParser()

            if config.has_section(CONFIG_SECTION_LCU):
                section = config[CONFIG_SECTION_LCU]
                settings.lockfile = section.get("lockfile") or None
                settings.ca_bundle = section.get("caBundle") or None
                settings.client_process_name = section.get("clientProcessName", settings.client_process_name)
                settings.game_process_name = section.get("gameProcessName", settings.game_process_name)
                settings.force_lock_file = _get_bool(section, "forceLockFile", settings.force_lock_file)
                settings.timeout = _get_float(section, "timeout", settings.timeout)

            if config.has_section(CONFIG_SECTION_LIVE):
                section = config[CONFIG_SECTION_LIVE]
                settings.live_ca_bundle = section.get("caBundle") or None
                settings.live_timeout = _get_float(section, "timeout", settings.live_timeout)

            log.debug(f"Loaded settings from {config_path}")
        else:
            log.debug(f"Config file not found at {config_path}, using defaults")

        env_lockfile = os.environ.get(LCU_LOCKFILE_ENV)
        if env_lockfile:
            settings.lockfile = env_lockfile

        return settings

    def save(self, path: Optional[Path] = None) -> Path:
        """Save settings to config.ini, keeping unrelated sections intact"""
        config_path = Path(path or self.path or get_config_file_path())
        config = configparser.ConfigParser()
        if config_path.exists():
            config.read(config_path, encoding="utf-8")

        for section in (CONFIG_SECTION_LCU, CONFIG_SECTION_LIVE):
            if not config.has_section(section):
                config.add_section(section)

        lcu = config[CONFIG_SECTION_LCU]
        lcu["lockfile"] = self.lockfile or ""
        lcu["forceLockFile"] = "true" if self.force_lock_file else "false"
        lcu["caBundle"] = self.ca_bundle or ""
        lcu["clientProcessName"] = self.client_process_name
        lcu["gameProcessName"] = self.game_process_name
        lcu["timeout"] = str(self.timeout)

        live = config[CONFIG_SECTION_LIVE]
        live["caBundle"] = self.live_ca_bundle or ""
        live["timeout"] = str(self.live_timeout)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            config.write(f)

        self.path = config_path
        log.debug(f"Saved settings to {config_path}")
        return config_path


def _get_bool(section: configparser.SectionProxy, key: str, default: bool) -> bool:
    try:
        return section.getboolean(key, fallback=default)
    except ValueError:
        log.warning(f"Invalid boolean for {key!r} in config, using {default}")
        return default


def _get_float(section: configparser.SectionProxy, key: str, default: float) -> float:
    try:
        return section.getfloat(key, fallback=default)
    except ValueError:
        log.warning(f"Invalid number for {key!r} in config, using {default}")
        return default
