import json
from logging.config import dictConfig
from pathlib import Path
from typing import Any, Optional


def json_load(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def json_dump(path: Path, obj: Any) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)


def path_exists(arg: str) -> Path:
    return Path(arg).resolve(strict=True)


def dir_exists(arg: str) -> Path:
    path = Path(arg)
    return path.parent.resolve(strict=True) / path.name


def output_resolve(output_path: Optional[Path], filename: str) -> Path:
    if not output_path:
        return Path.cwd() / filename
    if not output_path.name or output_path.is_dir():
        return output_path / filename
    return output_path


def configure_debug_logging(verbosity: str = "DEBUG") -> None:
    dictConfig(
        {
            "version": 1,
            "formatters": {
                "detailed": {
                    "format": "[%(asctime)s] %(levelname)-8s - %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S%z",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "detailed",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "drpakmap": {
                    "level": verbosity,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {"level": "ERROR", "handlers": ["console"]},
            "disable_existing_loggers": False,
        }
    )
