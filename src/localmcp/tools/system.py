"""``system_info`` — host and process metrics at call time."""

from __future__ import annotations

import json
import os
import platform
import time
from collections.abc import Mapping
from typing import Any

import psutil

from localmcp.store.models import now_iso
from localmcp.tools.registry import ToolSpec


def collect_system_info() -> dict[str, Any]:
    """Snapshot of the host and of this process. Values change between calls."""
    process = psutil.Process(os.getpid())
    memory = process.memory_info()
    return {
        "platform": platform.system().lower(),
        "pythonVersion": platform.python_version(),
        "pid": process.pid,
        "uptime": round(time.time() - process.create_time(), 3),
        "cpuCount": psutil.cpu_count(),
        "memory": {
            "rss": memory.rss,
            "vms": memory.vms,
            "systemPercent": psutil.virtual_memory().percent,
        },
        "timestamp": now_iso(),
    }


def system_info(args: Mapping[str, Any]) -> str:
    return json.dumps(collect_system_info(), indent=2)


def specs() -> list[ToolSpec]:
    return [
        ToolSpec(
            name="system_info",
            description="Get system information",
            handler=system_info,
            input_schema={"type": "object", "properties": {}, "required": []},
        ),
    ]
