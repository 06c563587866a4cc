#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Properties
Property-based accessors and actions for common LCU endpoints
"""

from typing import Optional
from urllib.parse import quote

from utils.core.logging import get_logger

log = get_logger()


class LCUProperties:
    """Property-based accessors for LCU endpoints"""

    def __init__(self, api):
        """Initialize properties handler

        Args:
            api: LCUAPI instance
        """
        self.api = api

    @property
    def current_summoner(self) -> Optional[dict]:
        """Get current summoner info"""
        return self.api.get("/lol-summoner/v1/current-summoner")

    @property
    def phase(self) -> Optional[str]:
        """Get current gameflow phase"""
        ph = self.api.get("/lol-gameflow/v1/gameflow-phase")
        return ph if isinstance(ph, str) else None

    @property
    def game_session(self) -> Optional[dict]:
        """Get current game session with mode and map info"""
        return self.api.get("/lol-gameflow/v1/session")

    @property
    def champ_select_session(self) -> Optional[dict]:
        """Get current champion select session"""
        return self.api.get("/lol-champ-select/v1/session")

    @property
    def lobby(self) -> Optional[dict]:
        return self.api.get("/lol-lobby/v2/lobby")

    @property
    def region_locale(self) -> Optional[dict]:
        """Get client region and locale information"""
        return self.api.get("/riotclient/region-locale")

    @property
    def client_language(self) -> Optional[str]:
        """Get client language from LCU API"""
        locale_info = self.region_locale
        if isinstance(locale_info, dict):
            return locale_info.get("locale")
        return None

    def summoner_by_id(self, summoner_id: int) -> Optional[dict]:
        return self.api.get(f"/lol-summoner/v1/summoners/{int(summoner_id)}")

    def summoner_by_puuid(self, puuid: str) -> Optional[dict]:
        return self.api.get(f"/lol-summoner/v2/summoners/puuid/{quote(puuid, safe='')}")

    def ranked_stats(self, puuid: Optional[str] = None) -> Optional[dict]:
        """Ranked stats for a player, or the current one when puuid is None"""
        if puuid is None:
            return self.api.get("/lol-ranked/v1/current-ranked-stats")
        return self.api.get(f"/lol-ranked/v1/ranked-stats/{quote(puuid, safe='')}")

    def match_history(self, puuid: Optional[str] = None, beg_index: int = 0, end_index: int = 19) -> Optional[dict]:
        """Match history page for a player, or the current one when puuid is None"""
        params = {"begIndex": beg_index, "endIndex": end_index}
        if puuid is None:
            return self.api.get("/lol-match-history/v1/products/lol/current-summoner/matches", params=params)
        return self.api.get(f"/lol-match-history/v1/products/lol/{quote(puuid, safe='')}/matches", params=params)

    def owned_champions(self) -> Optional[list]:
        """Champions owned by the current summoner (minimal form)"""
        data = self.api.get("/lol-champions/v1/owned-champions-minimal")
        return data if isinstance(data, list) else None

    # Actions
    def _action(self, name: str, resp) -> bool:
        if resp is not None and resp.status_code in (200, 201, 204):
            return True
        status_code = resp.status_code if resp is not None else "None"
        response_text = resp.text[:200] if resp is not None else "No response"
        log.warning(f"LCU {name} failed: status={status_code}, response={response_text}")
        return False

    def accept_ready_check(self) -> bool:
        return self._action("accept_ready_check", self.api.post("/lol-matchmaking/v1/ready-check/accept"))

    def decline_ready_check(self) -> bool:
        return self._action("decline_ready_check", self.api.post("/lol-matchmaking/v1/ready-check/decline"))

    def create_lobby(self, queue_id: int) -> bool:
        """Create a lobby for the given queue (e.g. 420 ranked solo, 450 ARAM)"""
        return self._action("create_lobby", self.api.post("/lol-lobby/v2/lobby", {"queueId": int(queue_id)}))

    def start_matchmaking(self) -> bool:
        return self._action("start_matchmaking", self.api.post("/lol-lobby/v2/lobby/matchmaking/search"))

    def stop_matchmaking(self) -> bool:
        return self._action("stop_matchmaking", self.api.delete("/lol-lobby/v2/lobby/matchmaking/search"))
