# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Compare installed numeric library versions against the minimums we test with."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from importlib import metadata
from typing import Callable, Dict, List, Optional

from packaging.version import InvalidVersion, Version


@dataclass
class ComponentConfig:
    name: str
    minimum: str
    purpose: str


COMPONENTS: Dict[str, ComponentConfig] = {
    "numpy": ComponentConfig(name="numpy", minimum="1.24", purpose="contiguous array reduction"),
    "pandas": ComponentConfig(name="pandas", minimum="2.0", purpose="DataFrame apply and sum"),
    "packaging": ComponentConfig(name="packaging", minimum="21.0", purpose="version comparison"),
}


def installed_version(name: str) -> Optional[str]:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None


def compare_versions(installed: Optional[str], minimum: Optional[str]) -> str:
    if not installed:
        return "not_installed"
    if not minimum:
        return "unknown"
    try:
        if Version(installed) < Version(minimum):
            return "outdated"
        return "current"
    except InvalidVersion:
        pass

    def split(ver: str) -> List[int]:
        return [int(part) for part in re.findall(r"\d+", ver)]

    parts = split(installed)
    if not parts:
        return "unknown"
    return "outdated" if parts < split(minimum) else "current"


def collect(lookup: Callable[[str], Optional[str]] = installed_version) -> List[Dict[str, str]]:
    rows: List[Dict[str, str]] = []
    for name, cfg in COMPONENTS.items():
        found = lookup(name)
        rows.append({
            "component": name,
            "installed_version": found or "",
            "minimum_version": cfg.minimum,
            "status": compare_versions(found, cfg.minimum),
            "purpose": cfg.purpose,
        })
    return rows


def render(rows: List[Dict[str, str]]) -> str:
    keys = ["component", "installed_version", "minimum_version"]
    widths = {key: max(len(key), *(len(row[key]) for row in rows)) for key in keys}
    fmt = f"{{:<{widths['component']}}}  {{:<{widths['installed_version']}}}  {{:<{widths['minimum_version']}}}  {{}}"
    header = fmt.format("Component", "Installed", "Minimum", "Status")
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(fmt.format(row["component"], row["installed_version"], row["minimum_version"], row["status"]))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--only-outdated", action="store_true")
    parser.add_argument("--strict", action="store_true", help="Exit 1 when any component is not current")
    args = parser.parse_args(argv)

    rows = collect()
    display_rows = rows
    if args.only_outdated:
        display_rows = [row for row in rows if row["status"] != "current"]

    if not display_rows and args.only_outdated:
        print("All tracked components are up to date.")
    else:
        print(render(display_rows))

    if args.strict and any(row["status"] != "current" for row in rows):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
