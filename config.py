#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Global constants for LCU Bridge
All arbitrary values are centralized here for easy tracking and modification
"""

import sys

# =============================================================================
# APPLICATION METADATA
# =============================================================================

APP_NAME = "LCUBridge"                   # Used for the user data directory
APP_VERSION = "0.4.0"                    # Application version
APP_USER_AGENT = f"LCUBridge/{APP_VERSION}"  # User-Agent header for HTTP requests


# =============================================================================
# PROCESS NAMES
# =============================================================================

# Linux is unsupported by the client itself; under Wine the Windows names show up
if sys.platform == "darwin":
    CLIENT_PROCESS_NAME = "LeagueClientUx"
    GAME_PROCESS_NAME = "League of Legends"
else:
    CLIENT_PROCESS_NAME = "LeagueClientUx.exe"
    GAME_PROCESS_NAME = "League of Legends.exe"


# =============================================================================
# LCU CONSTANTS
# =============================================================================

LCU_HOST = "127.0.0.1"                  # The LCU only listens on loopback
LCU_USERNAME = "riot"                   # Basic auth username, password comes from the lockfile
LCU_AUTH_TOKEN_ARG = "--remoting-auth-token="
LCU_APP_PORT_ARG = "--app-port="
LCU_LOCKFILE_NAME = "lockfile"
LCU_LOCKFILE_ENV = "LCU_LOCKFILE"       # Environment variable overriding lockfile discovery

# Common install locations checked when process scanning finds nothing
LCU_LOCKFILE_PATHS_WINDOWS = [
    "C:/Riot Games/League of Legends/lockfile",
    "C:/Program Files/Riot Games/League of Legends/lockfile",
    "C:/Program Files (x86)/Riot Games/League of Legends/lockfile",
]
LCU_LOCKFILE_PATHS_MACOS = [
    "/Applications/League of Legends.app/Contents/LoL/lockfile",
]
LCU_LOCKFILE_PATHS_LINUX = [
    "~/.local/share/League of Legends/lockfile",
]

# API request timeouts (seconds)
LCU_API_TIMEOUT_S = 2.0                 # Timeout for LCU API requests
LCU_BATCH_MAX_WORKERS = 8               # Worker threads for batched LCU requests

# HTTP statuses treated as "endpoint not available" by LCUAPI.get
LCU_NOT_AVAILABLE_STATUSES = (404, 405)


# =============================================================================
# WEBSOCKET CONSTANTS
# =============================================================================

WS_PING_INTERVAL_DEFAULT = 20  # Seconds between WebSocket pings
WS_PING_TIMEOUT_DEFAULT = 10   # Seconds before WebSocket ping times out
WS_RECONNECT_DELAY = 1.0       # Seconds to wait before WebSocket reconnect
WS_SUBPROTOCOL = "wamp"        # The LCU speaks WAMP 1.0 over its WebSocket
WS_THREAD_JOIN_TIMEOUT_S = 2.0 # Timeout for thread.join() on stop


# =============================================================================
# LIVE CLIENT / REPLAY CONSTANTS
# =============================================================================

LIVE_CLIENT_HOST = "127.0.0.1"
LIVE_CLIENT_PORT = 2999                 # Fixed port used by the game process
LIVE_CLIENT_DATA_PATH = "/liveclientdata"
REPLAY_PATH = "/replay"
LIVE_CLIENT_TIMEOUT_S = 2.0             # Timeout for in-game API requests
LIVE_CLIENT_PROBE_TIMEOUT_S = 1.0       # Timeout used when probing for a running game

# Team identifiers accepted by /liveclientdata/playerlist
LIVE_CLIENT_TEAMS = {"ORDER", "CHAOS"}


# =============================================================================
# LOGGING CONSTANTS
# =============================================================================

LOG_MAX_FILE_SIZE_MB_DEFAULT = 10        # Roll over to a new log file past this size
LOG_SEPARATOR_WIDTH = 80                 # Width of separator lines in logs (e.g., "=" * 80)
LOG_FILE_PREFIX = "lcu_bridge"
LOG_FILE_PATTERN = "lcu_bridge_*.log"
LOG_TIMESTAMP_FORMAT = "%d-%m-%Y_%H-%M-%S"  # No colons, for Windows compatibility
LOG_MAX_AGE_S = 24 * 60 * 60             # Logs older than this are removed on startup


# =============================================================================
# USER CONFIGURATION FILE
# =============================================================================

CONFIG_FILE_NAME = "config.ini"
CONFIG_SECTION_LCU = "LCU"
CONFIG_SECTION_LIVE = "LiveClient"


# =============================================================================
# PHASE NAMES
# =============================================================================

# Gameflow phases worth logging at info level
INTERESTING_PHASES = {
    "Lobby",
    "Matchmaking",
    "ReadyCheck",
    "ChampSelect",
    "GameStart",
    "InProgress",
    "EndOfGame"
}


# =============================================================================
# MAP / MODE IDENTIFIERS
# =============================================================================

MAP_ID_SUMMONERS_RIFT = 11
MAP_ID_HOWLING_ABYSS = 12


# =============================================================================
# DEFAULT ARGUMENTS
# =============================================================================

DEFAULT_VERBOSE = False
DEFAULT_WRITE_LOGS = True
DEFAULT_LIVE_ENDPOINT = "allgamedata"
DEFAULT_WATCH_TOPIC = "OnJsonApiEvent"
