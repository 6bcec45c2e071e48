# -*- coding: utf-8 -*-
"""
Render driver
Runs the reconciliation over a loaded dataset and builds the display
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

import config
from loadshed_dataset import Dataset
from loadshed_format import format_key
from loadshed_schedule import group_events

DisplayRow = Tuple[str, List[str]]


def build_display(dataset: Dataset) -> Tuple[str, List[DisplayRow]]:
    """Return the area name and (period label, windows) rows in event order"""
    result = group_events(dataset.events, dataset.days)
    rows = [(format_key(key), windows) for key, windows in result.items()]
    return dataset.name, rows


def render_html(dataset: Optional[Dataset], classes: Optional[str] = None) -> str:
    """Build the display markup; an empty wrapper until a dataset is available"""
    soup = BeautifulSoup("", "html.parser")
    wrapper = soup.new_tag("div", attrs={"class": classes or config.WRAPPER_CLASSES})
    soup.append(wrapper)

    if dataset is None:
        return str(soup)

    name, rows = build_display(dataset)

    area = soup.new_tag("div", attrs={"class": config.AREA_CLASSES})
    area.string = name
    wrapper.append(area)

    for label, windows in rows:
        period = soup.new_tag("div", attrs={"class": config.PERIOD_CLASSES})
        period.string = label
        wrapper.append(period)

        times = soup.new_tag("div", attrs={"class": config.WINDOWS_CLASSES})
        times.string = config.WINDOW_SEPARATOR.join(windows)
        wrapper.append(times)

    return str(soup)


def render_text(dataset: Dataset) -> str:
    name, rows = build_display(dataset)
    lines = [name]
    for label, windows in rows:
        lines.append(label)
        lines.append(config.WINDOW_SEPARATOR.join(windows))
    return "\n".join(lines)
