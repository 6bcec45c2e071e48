# -*- coding: utf-8 -*-
# Periodic refresh of the dataset

import time
from typing import Callable, Optional

import config
from log_utils import log
from loadshed_dataset import Dataset
from loadshed_schedule import DatasetError, LoadSheddingError


class RefreshTask:

    def __init__(self, fetch: Callable[[], Dataset], on_result: Callable[[Dataset], None],
                 update_interval: float = config.UPDATE_INTERVAL,
                 retry_delay: float = config.RETRY_DELAY):
        self.fetch = fetch
        self.on_result = on_result
        self.update_interval = update_interval
        self.retry_delay = retry_delay
        self.loaded = False

    def run_once(self) -> float:
        """Fetch and hand over one dataset

        Returns:
            Seconds to wait before the next run: the update interval after a
            successful fetch, the retry delay after a failed one
        """
        try:
            dataset = self.fetch()
        except (DatasetError, OSError, ValueError) as e:
            log(f"❌ Could not load data: {e}")
            return self.retry_delay

        try:
            self.on_result(dataset)
        except (LoadSheddingError, OSError) as e:
            log(f"❌ Could not show data: {e}")
            return self.retry_delay

        if not self.loaded:
            log("✔️ First dataset loaded")
        self.loaded = True
        return self.update_interval

    def run_forever(self, sleep: Callable[[float], None] = time.sleep,
                    max_cycles: Optional[int] = None):
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            delay = self.run_once()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            log(f"ℹ️ Next refresh in {delay:.0f}s")
            sleep(delay)
