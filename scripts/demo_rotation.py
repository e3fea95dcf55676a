"""Example script showing size-based rotation and retention with rotolog.

This script:
1. Builds a logger with a console sink and a small rotated file sink
2. Logs a few rounds of numbered lines, pausing between rounds so archives
   get distinct timestamps
3. Prints the resulting log directory listing

Console output is limited to warnings so the numbered lines only go to disk.
"""

from __future__ import annotations

import argparse
import pathlib
import time

from rotolog import Logger, build_config
from rotolog.utils.logging import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser("Demonstrate rotolog file rotation")
    parser.add_argument("--log-dir", type=pathlib.Path, default=pathlib.Path("./demo-logs"))
    parser.add_argument("--log-name", default="example.log")
    parser.add_argument("--max-file-size", type=int, default=1024, help="Rotation threshold in bytes")
    parser.add_argument("--logs-to-keep", type=int, default=5)
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("--per-round", type=int, default=1024)
    parser.add_argument(
        "--pause", type=float, default=1.0, help="Seconds to sleep between rounds"
    )
    parser.add_argument("--diagnostics", default="DEBUG", help="Level of rotolog's own output")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(args.diagnostics)

    config = build_config(
        level="debug",
        console={"level": "warn", "info_color": "green"},
        file={
            "directory": args.log_dir,
            "log_name": args.log_name,
            "max_file_size": args.max_file_size,
            "logs_to_keep": args.logs_to_keep,
            "level": "info",
        },
        log_date=True,
        log_time=True,
        log_path=True,
    )

    with Logger(config) as log:
        for i in range(args.rounds):
            for j in range(args.per_round):
                log.info("%d", i * args.per_round + j)
            log.warn("round %d of %d done", i + 1, args.rounds)
            time.sleep(args.pause)

    print(f"Files in {args.log_dir}:")
    for path in sorted(args.log_dir.iterdir()):
        print(f"  {path.name} ({path.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
