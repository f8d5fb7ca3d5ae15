import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from colorama import Fore, Style, init

init(autoreset=True)

COMPONENT_COLORS = {
    "Orchestrator": Fore.CYAN,
    "Evaluator": Fore.GREEN,
    "AI": Fore.MAGENTA,
    "Fallback": Fore.YELLOW,
    "Decision": Fore.BLUE,
    "Storage": Fore.WHITE,
    "System": Fore.WHITE
}

COMPONENT_PREFIXES = {
    "Orchestrator": "[LOG :: ORCHESTRATOR]",
    "Evaluator": "[LOG :: EVALUATOR]",
    "AI": "[LOG :: AI]",
    "Fallback": "[LOG :: FALLBACK]",
    "Decision": "[LOG :: DECISION]",
    "Storage": "[LOG :: STORAGE]",
    "System": "[LOG :: SYSTEM]"
}


class InterviewLogger:
    def __init__(self, log_dir: str | None = None):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self._new_log_file()
        self.log_data = self._empty_log()
        self._setup_logger()

    def _setup_logger(self):
        logger = logging.getLogger("interviewace.events")
        logger.setLevel(logging.INFO)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter('%(message)s'))
            logger.addHandler(handler)
            logger.propagate = False
        self.logger = logger

    def _new_log_file(self) -> Path | None:
        if self.log_dir is None:
            return None
        return self.log_dir / f"interview_log_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.json"

    @staticmethod
    def _empty_log() -> Dict[str, Any]:
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "events": [],
            "metrics": {
                "total_tokens": 0,
                "prompt_tokens": 0,
                "completion_tokens": 0,
                "latency_ms": [],
                "ai_calls": 0,
                "ai_failures": 0,
                "fallbacks": 0
            }
        }

    def log(self, component: str, message: str, data: Dict[str, Any] | None = None, level: int = logging.INFO):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": component,
            "message": message,
            "data": data or {}
        }
        self.log_data["events"].append(log_entry)

        color = COMPONENT_COLORS.get(component, Fore.WHITE)
        prefix = COMPONENT_PREFIXES.get(component, f"[LOG :: {component.upper()}]")
        formatted_msg = f"{color}{prefix}{Style.RESET_ALL} {message}"
        if data:
            formatted_msg += f" | Data: {json.dumps(data, ensure_ascii=False, default=str)}"

        self.logger.log(level, formatted_msg)
        self._save_log()

    def warning(self, component: str, message: str, data: Dict[str, Any] | None = None):
        self.log(component, message, data, level=logging.WARNING)

    def log_tokens(self, prompt_tokens: int, completion_tokens: int):
        metrics = self.log_data["metrics"]
        metrics["prompt_tokens"] += prompt_tokens
        metrics["completion_tokens"] += completion_tokens
        metrics["total_tokens"] += prompt_tokens + completion_tokens
        self.log("System", f"[METRIC :: TOKENS] +{prompt_tokens} prompt, +{completion_tokens} completion")

    def log_latency(self, latency_ms: float):
        self.log_data["metrics"]["latency_ms"].append(latency_ms)
        self.log("System", f"[METRIC :: LATENCY] {latency_ms:.2f}ms")

    def count(self, metric_name: str):
        self.log_data["metrics"][metric_name] = self.log_data["metrics"].get(metric_name, 0) + 1

    def _save_log(self):
        if self.log_file is None:
            return
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                json.dump(self.log_data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            self.logger.error(f"Error saving log: {e}")

    def reset(self):
        self.log_file = self._new_log_file()
        self.log_data = self._empty_log()

    def get_log_data(self) -> Dict[str, Any]:
        return self.log_data.copy()
