#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client
Main orchestrator for the in-game and replay APIs
"""

from typing import Optional, Union

from config import LIVE_CLIENT_PORT, LIVE_CLIENT_TIMEOUT_S

from .live_api import LiveAPI
from ..features.game_data import LiveGameData
from ..features.replay import LiveReplay


class LiveClient:
    """In-game API client - main orchestrator"""

    def __init__(
        self,
        port: int = LIVE_CLIENT_PORT,
        verify: Union[bool, str] = False,
        timeout: float = LIVE_CLIENT_TIMEOUT_S,
    ):
        """Initialize the in-game client

        Args:
            port: In-game API port
            verify: False to accept the self-signed certificate, or a CA bundle path
            timeout: Default request timeout in seconds
        """
        self._api = LiveAPI(port=port, verify=verify, timeout=timeout)
        self.game = LiveGameData(self._api)
        self.replay = LiveReplay(self._api)

    @classmethod
    def from_settings(cls, settings) -> "LiveClient":
        """Build a client from a utils.core.settings.Settings instance"""
        return cls(verify=settings.live_verify, timeout=settings.live_timeout)

    @property
    def base(self) -> str:
        return self._api.base

    def get(self, path: str, params: Optional[dict] = None):
        """GET any in-game API path (decoded JSON or None)"""
        return self._api.get(path, params=params)

    def is_available(self) -> bool:
        """True when the in-game API server answers"""
        return self._api.is_available()

    # Game data (delegated to game data handler)
    def is_game_active(self) -> bool:
        return self.game.is_game_active()

    def all_game_data(self) -> Optional[dict]:
        return self.game.all_game_data()

    def active_player(self) -> Optional[dict]:
        return self.game.active_player()

    def active_player_name(self) -> Optional[str]:
        return self.game.active_player_name()

    def active_player_abilities(self) -> Optional[dict]:
        return self.game.active_player_abilities()

    def active_player_runes(self) -> Optional[dict]:
        return self.game.active_player_runes()

    def player_list(self, team: Optional[str] = None) -> Optional[list]:
        return self.game.player_list(team)

    def player_scores(self, riot_id: str) -> Optional[dict]:
        return self.game.player_scores(riot_id)

    def player_summoner_spells(self, riot_id: str) -> Optional[dict]:
        return self.game.player_summoner_spells(riot_id)

    def player_main_runes(self, riot_id: str) -> Optional[dict]:
        return self.game.player_main_runes(riot_id)

    def player_items(self, riot_id: str) -> Optional[list]:
        return self.game.player_items(riot_id)

    def event_data(self, event_id: Optional[int] = None) -> Optional[dict]:
        return self.game.event_data(event_id)

    def game_stats(self) -> Optional[dict]:
        return self.game.game_stats()

    def close(self):
        self._api.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
