from .UI import UI as StopwatchUI
from .engine import TimerEngine
from .clock import ManualClock
from .config import StopwatchConfig, loadConfig

__all__ = ["StopwatchUI", "TimerEngine", "ManualClock", "StopwatchConfig", "loadConfig"]
