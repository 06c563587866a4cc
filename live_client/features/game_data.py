#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Live Client Data
Read-only endpoints under /liveclientdata exposing the running match
"""

from typing import Optional

from config import LIVE_CLIENT_DATA_PATH, LIVE_CLIENT_PROBE_TIMEOUT_S, LIVE_CLIENT_TEAMS


class LiveGameData:
    """Accessors for the Live Client Data API"""

    def __init__(self, api):
        """
        Args:
            api: LiveAPI instance
        """
        self.api = api

    def _get(self, endpoint: str, params: Optional[dict] = None, timeout: Optional[float] = None):
        return self.api.get(f"{LIVE_CLIENT_DATA_PATH}/{endpoint}", params=params, timeout=timeout)

    def is_game_active(self) -> bool:
        """Return True if a game is currently running"""
        return self._get("gamestats", timeout=LIVE_CLIENT_PROBE_TIMEOUT_S) is not None

    def all_game_data(self) -> Optional[dict]:
        """Everything in one call: activePlayer, allPlayers, events, gameData"""
        return self._get("allgamedata")

    def active_player(self) -> Optional[dict]:
        """Full data for the active player (stats, abilities, runes, level)"""
        return self._get("activeplayer")

    def active_player_name(self) -> Optional[str]:
        """The active player's Riot ID (name#tag)"""
        return self._get("activeplayername")

    def active_player_abilities(self) -> Optional[dict]:
        return self._get("activeplayerabilities")

    def active_player_runes(self) -> Optional[dict]:
        return self._get("activeplayerrunes")

    def player_list(self, team: Optional[str] = None) -> Optional[list]:
        """Scoreboard data for every player, optionally one team only

        Args:
            team: "ORDER" or "CHAOS"
        """
        params = None
        if team is not None:
            team = team.upper()
            if team not in LIVE_CLIENT_TEAMS:
                raise ValueError(f"team must be one of {sorted(LIVE_CLIENT_TEAMS)}, got {team!r}")
            params = {"teamID": team}
        return self._get("playerlist", params=params)

    def player_scores(self, riot_id: str) -> Optional[dict]:
        return self._get("playerscores", params={"riotId": riot_id})

    def player_summoner_spells(self, riot_id: str) -> Optional[dict]:
        return self._get("playersummonerspells", params={"riotId": riot_id})

    def player_main_runes(self, riot_id: str) -> Optional[dict]:
        return self._get("playermainrunes", params={"riotId": riot_id})

    def player_items(self, riot_id: str) -> Optional[list]:
        return self._get("playeritems", params={"riotId": riot_id})

    def event_data(self, event_id: Optional[int] = None) -> Optional[dict]:
        """Game events, all of them or only those from ``event_id`` onward"""
        params = {"eventID": int(event_id)} if event_id is not None else None
        return self._get("eventdata", params=params)

    def game_stats(self) -> Optional[dict]:
        """Game metadata: gameMode, gameTime, mapName, mapNumber, mapTerrain"""
        return self._get("gamestats")

    def raw(self, endpoint: str, params: Optional[dict] = None):
        """Any /liveclientdata endpoint by name"""
        return self._get(endpoint.strip("/"), params=params)
