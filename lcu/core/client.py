#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API client
Main orchestrator for LCU API interactions
"""

from typing import Any, List, Optional, Sequence, Union

from config import CLIENT_PROCESS_NAME, GAME_PROCESS_NAME, LCU_API_TIMEOUT_S

from .lcu_connection import LCUConnection
from .lcu_api import LCUAPI
from .process_info import ClientCredentials
from ..features.lcu_properties import LCUProperties
from ..features.lcu_game_mode import LCUGameMode
from ..features.lcu_batch import BatchRequest, LCUBatch


class LCU:
    """League Client API client - main orchestrator"""

    def __init__(
        self,
        lockfile_path: Optional[str] = None,
        force_lock_file: bool = False,
        verify: Union[bool, str] = False,
        timeout: float = LCU_API_TIMEOUT_S,
        client_process_name: str = CLIENT_PROCESS_NAME,
        game_process_name: str = GAME_PROCESS_NAME,
    ):
        """Initialize LCU client

        Args:
            lockfile_path: Optional explicit path to lockfile
            force_lock_file: Always read the lockfile instead of the client command line
            verify: False to trust the self-signed certificate, or a CA bundle path
            timeout: Default request timeout in seconds
            client_process_name: Client process name to look for
            game_process_name: Game process name to look for
        """
        self._connection = LCUConnection(
            lockfile_path,
            force_lock_file=force_lock_file,
            verify=verify,
            client_process_name=client_process_name,
            game_process_name=game_process_name,
        )
        self._api = LCUAPI(self._connection, timeout=timeout)
        self._properties = LCUProperties(self._api)
        self._game_mode = LCUGameMode(self._properties)
        self._batch = LCUBatch(self._api)

    @classmethod
    def from_settings(cls, settings) -> "LCU":
        """Build a client from a utils.core.settings.Settings instance"""
        return cls(
            settings.lockfile,
            force_lock_file=settings.force_lock_file,
            verify=settings.verify,
            timeout=settings.timeout,
            client_process_name=settings.client_process_name,
            game_process_name=settings.game_process_name,
        )

    # Connection properties (delegated to connection)
    @property
    def connection(self) -> LCUConnection:
        return self._connection

    @property
    def ok(self) -> bool:
        """Check if LCU connection is active"""
        return self._connection.ok

    @property
    def port(self) -> Optional[int]:
        return self._connection.port

    @property
    def pw(self) -> Optional[str]:
        return self._connection.pw

    @property
    def base(self) -> Optional[str]:
        """Get LCU base URL"""
        return self._connection.base

    @property
    def credentials(self) -> Optional[ClientCredentials]:
        return self._connection.credentials

    @property
    def last_error(self):
        """Why the last discovery failed, if it did"""
        return self._connection.last_error

    @property
    def session(self):
        """Get the underlying requests session"""
        return self._connection.session

    def refresh_if_needed(self, force: bool = False):
        """Refresh connection if needed"""
        self._connection.refresh_if_needed(force)

    # Requests (delegated to API handler)
    def request(self, method: str, path: str, json_data: Any = None, params: Optional[dict] = None,
                timeout: Optional[float] = None, headers: Optional[dict] = None):
        return self._api.request(method, path, json_data=json_data, params=params, timeout=timeout, headers=headers)

    def request_json(self, method: str, path: str, json_data: Any = None, params: Optional[dict] = None,
                     timeout: Optional[float] = None):
        """Raising request variant, see LCUAPI.request_json"""
        return self._api.request_json(method, path, json_data=json_data, params=params, timeout=timeout)

    def get(self, path: str, timeout: Optional[float] = None, params: Optional[dict] = None):
        """Make GET request to LCU API (decoded JSON or None)"""
        return self._api.get(path, timeout, params)

    def post(self, path: str, json_data: Any = None, timeout: Optional[float] = None):
        return self._api.post(path, json_data, timeout)

    def put(self, path: str, json_data: Any = None, timeout: Optional[float] = None):
        return self._api.put(path, json_data, timeout)

    def patch(self, path: str, json_data: Any = None, timeout: Optional[float] = None):
        return self._api.patch(path, json_data, timeout)

    def delete(self, path: str, timeout: Optional[float] = None):
        return self._api.delete(path, timeout)

    def head(self, path: str, timeout: Optional[float] = None):
        return self._api.head(path, timeout)

    def batch(self, requests: Sequence[BatchRequest], max_workers: Optional[int] = None) -> List:
        """Run requests concurrently, responses in input order"""
        return self._batch.run(requests, max_workers)

    def get_all(self, paths: Sequence[str], max_workers: Optional[int] = None) -> List:
        return self._batch.get_all(paths, max_workers)

    # Properties (delegated to properties handler)
    @property
    def current_summoner(self) -> Optional[dict]:
        """Get current summoner info"""
        return self._properties.current_summoner

    @property
    def phase(self) -> Optional[str]:
        """Get current gameflow phase"""
        return self._properties.phase

    @property
    def game_session(self) -> Optional[dict]:
        return self._properties.game_session

    @property
    def champ_select_session(self) -> Optional[dict]:
        return self._properties.champ_select_session

    @property
    def lobby(self) -> Optional[dict]:
        return self._properties.lobby

    @property
    def region_locale(self) -> Optional[dict]:
        return self._properties.region_locale

    @property
    def client_language(self) -> Optional[str]:
        return self._properties.client_language

    def summoner_by_id(self, summoner_id: int) -> Optional[dict]:
        return self._properties.summoner_by_id(summoner_id)

    def summoner_by_puuid(self, puuid: str) -> Optional[dict]:
        return self._properties.summoner_by_puuid(puuid)

    def ranked_stats(self, puuid: Optional[str] = None) -> Optional[dict]:
        return self._properties.ranked_stats(puuid)

    def match_history(self, puuid: Optional[str] = None, beg_index: int = 0, end_index: int = 19) -> Optional[dict]:
        return self._properties.match_history(puuid, beg_index, end_index)

    def owned_champions(self) -> Optional[list]:
        return self._properties.owned_champions()

    def accept_ready_check(self) -> bool:
        return self._properties.accept_ready_check()

    def decline_ready_check(self) -> bool:
        return self._properties.decline_ready_check()

    def create_lobby(self, queue_id: int) -> bool:
        return self._properties.create_lobby(queue_id)

    def start_matchmaking(self) -> bool:
        return self._properties.start_matchmaking()

    def stop_matchmaking(self) -> bool:
        return self._properties.stop_matchmaking()

    # Game mode properties (delegated to game mode handler)
    @property
    def game_mode(self) -> Optional[str]:
        """Get current game mode (e.g., 'ARAM', 'CLASSIC')"""
        return self._game_mode.game_mode

    @property
    def map_id(self) -> Optional[int]:
        return self._game_mode.map_id

    @property
    def queue_id(self) -> Optional[int]:
        return self._game_mode.queue_id

    @property
    def is_aram(self) -> bool:
        return self._game_mode.is_aram

    @property
    def is_sr(self) -> bool:
        return self._game_mode.is_sr

    def close(self):
        self._connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
