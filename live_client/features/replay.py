#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Replay API
Playback, render, recording and sequence control for replays (and live games
with the replay API enabled in game.cfg)
"""

from typing import Optional

from config import REPLAY_PATH


class LiveReplay:
    """Accessors for the /replay endpoints

    ``set_*`` methods take the API's own camelCase field names, e.g.
    ``set_playback(time=180.0, speed=0.0, paused=True)``.
    """

    def __init__(self, api):
        """
        Args:
            api: LiveAPI instance
        """
        self.api = api

    def game(self) -> Optional[dict]:
        """Information about the running game process"""
        return self.api.get(f"{REPLAY_PATH}/game")

    def playback(self) -> Optional[dict]:
        return self.api.get(f"{REPLAY_PATH}/playback")

    def set_playback(self, **fields) -> Optional[dict]:
        return self.api.post(f"{REPLAY_PATH}/playback", fields)

    def render(self) -> Optional[dict]:
        return self.api.get(f"{REPLAY_PATH}/render")

    def set_render(self, **fields) -> Optional[dict]:
        return self.api.post(f"{REPLAY_PATH}/render", fields)

    def recording(self) -> Optional[dict]:
        return self.api.get(f"{REPLAY_PATH}/recording")

    def set_recording(self, **fields) -> Optional[dict]:
        return self.api.post(f"{REPLAY_PATH}/recording", fields)

    def sequence(self) -> Optional[dict]:
        return self.api.get(f"{REPLAY_PATH}/sequence")

    def set_sequence(self, sequence: dict) -> Optional[dict]:
        """Replace the keyframe sequence; an empty dict clears it"""
        return self.api.post(f"{REPLAY_PATH}/sequence", sequence)
