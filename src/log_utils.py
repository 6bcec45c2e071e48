# -*- coding: utf-8 -*-
# Shared log helper

import os
from datetime import datetime

import config

TAG = "loadshed"


def log(message: str):
    ts = datetime.now(config.TIMEZONE).strftime("%Y-%m-%d %H:%M:%S")
    line = f"{ts} [{TAG}] {message}"
    print(line)
    log_dir = os.path.dirname(config.LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    with open(config.LOG_FILE, "a", encoding="utf-8") as f:
        f.write(line + "\n")
