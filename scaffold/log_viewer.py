#!/usr/bin/env python3
"""Log viewer and analyzer for scaffold server logs."""

import argparse
import re
import statistics
import sys
import time
from collections import Counter, deque
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from scaffold.logging_config import ACCESS_LOG_NAME, APP_LOG_NAME, ERROR_LOG_NAME

# ANSI color codes
class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    RESET = '\033[0m'

DEFAULT_LINES = 50
FOLLOW_SLEEP = 0.1

FILE_MAP = {
    "main": APP_LOG_NAME,
    "error": ERROR_LOG_NAME,
    "access": ACCESS_LOG_NAME,
}

FIELD_RE = re.compile(r'(\w+)=([^|]*)')


def tail_file(filepath: Path, lines: int = DEFAULT_LINES) -> List[str]:
    """Get last N lines from file."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            return list(deque(f, maxlen=lines))
    except FileNotFoundError:
        return [f"Log file not found: {filepath}\n"]
    except (OSError, UnicodeDecodeError) as e:
        return [f"Error reading log file {filepath}: {e}\n"]


def colorize_line(line: str) -> str:
    line = line.rstrip()
    if "ERROR" in line:
        return f"{Colors.RED}{line}{Colors.RESET}"
    elif "WARNING" in line:
        return f"{Colors.YELLOW}{line}{Colors.RESET}"
    elif "INFO" in line or "ACCESS" in line:
        return f"{Colors.GREEN}{line}{Colors.RESET}"
    return line


def follow_log(filepath: Path) -> None:
    """Follow a log file in real-time (like tail -f)."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            f.seek(0, 2)
            while True:
                line = f.readline()
                if not line:
                    time.sleep(FOLLOW_SLEEP)
                    continue
                print(colorize_line(line))
    except KeyboardInterrupt:
        print("\nLog following stopped.")
    except FileNotFoundError:
        print(f"Log file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error following log file: {e}")


def parse_access_line(line: str) -> Optional[Dict[str, object]]:
    """Turn an access log line into a dict, or None if it is not one.

    `status` becomes an int (None for N/A) and `response_time` a float in seconds.
    """
    fields = {key: value.strip() for key, value in FIELD_RE.findall(line)}
    if "method" not in fields or "path" not in fields:
        return None

    entry: Dict[str, object] = {
        "method": fields["method"],
        "path": fields["path"],
        "client": fields.get("client", "unknown"),
        "status": None,
        "response_time": None,
        "error": fields.get("error"),
    }
    try:
        entry["status"] = int(fields.get("status", ""))
    except ValueError:
        pass
    try:
        entry["response_time"] = float(fields.get("response_time", "").rstrip("s"))
    except ValueError:
        pass
    return entry


def summarize_access(lines: Iterable[str]) -> Dict[str, object]:
    endpoints: Counter = Counter()
    status_classes: Counter = Counter()
    clients = set()
    response_times: List[float] = []
    failures = 0

    for line in lines:
        entry = parse_access_line(line)
        if entry is None:
            continue
        endpoints[f"{entry['method']} {entry['path']}"] += 1
        clients.add(entry["client"])
        status = entry["status"]
        status_classes[f"{status // 100}xx" if status else "N/A"] += 1
        if entry["error"]:
            failures += 1
        if entry["response_time"] is not None:
            response_times.append(entry["response_time"])

    return {
        "total_requests": sum(endpoints.values()),
        "endpoints": endpoints,
        "status_classes": status_classes,
        "clients": clients,
        "failures": failures,
        "response_times": response_times,
    }


def count_levels(lines: Iterable[str]) -> Dict[str, int]:
    levels = {"errors": 0, "warnings": 0}
    for line in lines:
        if "| ERROR |" in line:
            levels["errors"] += 1
        elif "| WARNING |" in line:
            levels["warnings"] += 1
    return levels


def _read_lines(path: Path) -> List[str]:
    if not path.exists():
        return []
    with path.open('r', encoding='utf-8') as f:
        return f.readlines()


def analyze_logs(log_dir: Path) -> None:
    """Print request, status and timing statistics for a log directory."""
    access = summarize_access(_read_lines(log_dir / ACCESS_LOG_NAME))
    levels = count_levels(_read_lines(log_dir / APP_LOG_NAME))

    print("=" * 60)
    print("SCAFFOLD SERVER LOG ANALYSIS")
    print("=" * 60)

    print(f"Total Requests:     {access['total_requests']}")
    for endpoint, count in access["endpoints"].most_common():
        print(f"  - {endpoint:<28} {count}")
    print()

    print("Status Codes:")
    for status_class, count in sorted(access["status_classes"].items()):
        print(f"  - {status_class:<28} {count}")
    print(f"Failed Requests:    {access['failures']}")
    print()

    print(f"Errors:             {levels['errors']}")
    print(f"Warnings:           {levels['warnings']}")
    print(f"Unique Clients:     {len(access['clients'])}")
    print()

    times = access["response_times"]
    if times:
        print(f"Average Response:   {statistics.mean(times):.3f} seconds")
        print(f"Median Response:    {statistics.median(times):.3f} seconds")
        print(f"Fastest Response:   {min(times):.3f} seconds")
        print(f"Slowest Response:   {max(times):.3f} seconds")

    print("=" * 60)


def main() -> None:
    """Main entry point for log viewer."""
    parser = argparse.ArgumentParser(description="Scaffold Server Log Viewer and Analyzer")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                       help="Directory containing log files")
    parser.add_argument("--lines", "-n", type=int, default=DEFAULT_LINES,
                       help="Number of lines to show")
    parser.add_argument("--follow", "-f", action="store_true",
                       help="Follow log in real-time")
    parser.add_argument("--analyze", "-a", action="store_true",
                       help="Analyze logs and show statistics")
    parser.add_argument("--file", choices=sorted(FILE_MAP), default="main",
                       help="Which log file to view")

    args = parser.parse_args()

    if not args.log_dir.exists():
        print(f"Log directory not found: {args.log_dir}")
        print("Make sure the server has been started at least once.")
        sys.exit(1)

    if args.analyze:
        analyze_logs(args.log_dir)
        return

    log_file = args.log_dir / FILE_MAP[args.file]

    if args.follow:
        print(f"Following {log_file} (Press Ctrl+C to stop)")
        print("-" * 60)
        follow_log(log_file)
    else:
        print(f"Last {args.lines} lines from {log_file}:")
        print("-" * 60)
        for line in tail_file(log_file, args.lines):
            print(colorize_line(line))


if __name__ == "__main__":
    main()
