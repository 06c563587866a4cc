#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Game Mode Detection
Handles game mode and map detection
"""

from typing import Optional

from config import MAP_ID_HOWLING_ABYSS, MAP_ID_SUMMONERS_RIFT


class LCUGameMode:
    """Handles game mode detection"""

    def __init__(self, properties):
        """Initialize game mode handler

        Args:
            properties: LCUProperties instance
        """
        self.properties = properties

    def _game_data(self) -> dict:
        session = self.properties.game_session
        if isinstance(session, dict):
            return session.get("gameData") or {}
        return {}

    @staticmethod
    def _queue_field(game_data: dict, key: str):
        queue = game_data.get("queue") or {}
        value = queue.get(key)
        return value if value is not None else game_data.get(key)

    @property
    def game_mode(self) -> Optional[str]:
        """Get current game mode (e.g., 'ARAM', 'CLASSIC')"""
        return self._queue_field(self._game_data(), "gameMode")

    @property
    def map_id(self) -> Optional[int]:
        """Get current map ID (12 = Howling Abyss, 11 = Summoner's Rift)"""
        return self._queue_field(self._game_data(), "mapId")

    @property
    def queue_id(self) -> Optional[int]:
        return (self._game_data().get("queue") or {}).get("id")

    @property
    def is_aram(self) -> bool:
        """Check if currently in ARAM (Howling Abyss)"""
        game_data = self._game_data()
        return (self._queue_field(game_data, "mapId") == MAP_ID_HOWLING_ABYSS
                or self._queue_field(game_data, "gameMode") == "ARAM")

    @property
    def is_sr(self) -> bool:
        """Check if currently in Summoner's Rift"""
        game_data = self._game_data()
        return (self._queue_field(game_data, "mapId") == MAP_ID_SUMMONERS_RIFT
                or self._queue_field(game_data, "gameMode") == "CLASSIC")
