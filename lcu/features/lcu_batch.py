#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Batched Requests
Runs many LCU requests concurrently over the shared session
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import requests

from config import LCU_BATCH_MAX_WORKERS
from utils.core.logging import get_logger

log = get_logger()


@dataclass(frozen=True)
class BatchRequest:
    """A single request in a batch"""
    method: str
    path: str
    json_data: Any = None


class LCUBatch:
    """Executes BatchRequests concurrently"""

    def __init__(self, api, max_workers: int = LCU_BATCH_MAX_WORKERS):
        """
        Args:
            api: LCUAPI instance
            max_workers: Upper bound on concurrent requests
        """
        self.api = api
        self.max_workers = max_workers

    def run(self, batch: Sequence[BatchRequest], max_workers: Optional[int] = None) -> List[Optional[requests.Response]]:
        """Run every request and return the responses in input order

        Unreachable requests yield None, as with LCUAPI.request.
        """
        if not batch:
            return []
        workers = max(1, min(max_workers or self.max_workers, len(batch)))
        log.debug(f"[LCU] running batch of {len(batch)} requests on {workers} workers")
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="LCUBatch") as pool:
            return list(pool.map(self._run_one, batch))

    def _run_one(self, req: BatchRequest) -> Optional[requests.Response]:
        return self.api.request(req.method, req.path, json_data=req.json_data)

    def get_all(self, paths: Sequence[str], max_workers: Optional[int] = None) -> List[Any]:
        """GET every path concurrently, returning decoded JSON (or None) in order"""
        if not paths:
            return []
        workers = max(1, min(max_workers or self.max_workers, len(paths)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="LCUBatch") as pool:
            return list(pool.map(self.api.get, paths))
