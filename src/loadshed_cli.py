#!/usr/bin/env python3
"""
Load-shedding display
Reconciles announced stage events with the recurring stage slots of an area
and prints (or writes as HTML) the outage windows per event
"""

import argparse
import sys

import config
from log_utils import log
from loadshed_dataset import Dataset, read_dataset_file
from loadshed_format import format_label
from loadshed_refresh import RefreshTask
from loadshed_render import render_html, render_text
from loadshed_schedule import LoadSheddingError


def show(dataset: Dataset, html_path: str = None, classes: str = None):
    if html_path:
        with open(html_path, 'w', encoding='utf-8') as f:
            f.write(render_html(dataset, classes))
        log(f"💾 Wrote display → {html_path}")
    else:
        print(render_text(dataset))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Show load-shedding outage windows for an area')
    parser.add_argument('--input', default=config.SOURCE_JSON, help='Area dataset JSON file')
    parser.add_argument('--html', help='Write the display as an HTML fragment to this file')
    parser.add_argument('--classes', default=config.WRAPPER_CLASSES, help='CSS classes of the wrapper div')
    parser.add_argument('--watch', action='store_true', help='Keep refreshing the display')
    parser.add_argument('--interval', type=float, default=config.UPDATE_INTERVAL, help='Seconds between refreshes')
    parser.add_argument('--retry-delay', type=float, default=config.RETRY_DELAY, help='Seconds before retrying a failed load')
    parser.add_argument('--label', help='Humanize one raw "{start} - {end} ({note})" label and exit')

    args = parser.parse_args(argv)

    if args.label:
        try:
            print(format_label(args.label))
        except LoadSheddingError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if args.watch:
        task = RefreshTask(
            fetch=lambda: read_dataset_file(args.input),
            on_result=lambda dataset: show(dataset, args.html, args.classes),
            update_interval=args.interval,
            retry_delay=args.retry_delay,
        )
        try:
            task.run_forever()
        except KeyboardInterrupt:
            log("⚠️ Interrupted by user")
        return 0

    try:
        dataset = read_dataset_file(args.input)
        show(dataset, args.html, args.classes)
    except (LoadSheddingError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
