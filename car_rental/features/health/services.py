import platform
from typing import Any, Dict

import psutil

from car_rental.core.context import ServiceContext
from car_rental.db.session import ping


def format_uptime(seconds: float) -> str:
    """1d 2h 3m 4s ; les composantes nulles sont omises."""
    seconds = int(seconds)
    days, rest = divmod(seconds, 24 * 3600)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    for value, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (secs, "s")):
        if value > 0:
            parts.append(f"{value}{unit}")
    return " ".join(parts)


class HealthService:
    def __init__(self, ctx: ServiceContext):
        self.ctx = ctx

    def basic(self) -> Dict[str, Any]:
        return {
            "status": "UP",
            "timestamp": self.ctx.now_fn(),
            "uptime": self.ctx.uptime,
            "environment": self.ctx.settings.ENV,
        }

    def detailed(self) -> Dict[str, Any]:
        engine = self.ctx.engine
        uptime = self.ctx.uptime
        rss = psutil.Process().memory_info().rss
        total = psutil.virtual_memory().total

        return {
            "status": "UP",
            "timestamp": self.ctx.now_fn(),
            "db": {
                "status": "Connected" if ping(engine) else "Disconnected",
                "name": engine.dialect.name,
                "host": engine.url.host or engine.url.database,
            },
            "system": {
                "memory": {
                    "total": round(total / 1024 / 1024),
                    "used": round(rss / 1024 / 1024),
                    "unit": "MB",
                },
                "uptime": {
                    "seconds": round(uptime),
                    "formatted": format_uptime(uptime),
                },
                "pythonVersion": platform.python_version(),
                "platform": platform.system().lower(),
            },
            "environment": self.ctx.settings.ENV,
        }
