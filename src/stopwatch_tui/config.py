from __future__ import annotations

import os
import json
import logging
import typing as tp

import dotenv
from pydantic import BaseModel, ConfigDict, Field

from .clock import SYSTEM_CLOCKS, TimeSource

log = logging.getLogger(__name__)

ENV_CONFIG_PATH = 'STOPWATCH_CONFIG'

class StopwatchConfig(BaseModel):
    title: str = 'Stopwatch'
    poll_interval_ms: float = Field(default=100.0, gt=0.0)
    time_source: tp.Literal['monotonic', 'wall'] = 'monotonic'
    log_file: str | None = None
    log_level: tp.Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'INFO'

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    @classmethod
    def fromFile(cls, path: str) -> StopwatchConfig:
        with open(path, 'r', encoding='utf-8') as f:
            j = json.load(f)
        return cls.model_validate(j)
    
    def makeTimeSource(self) -> TimeSource:
        return SYSTEM_CLOCKS[self.time_source]
    
    def configureLogging(self) -> None:
        '''
        Without `log_file` no handler is installed:  
        stderr belongs to the TUI.  
        '''
        if self.log_file is None:
            logging.getLogger().setLevel(self.log_level)
            return
        logging.basicConfig(
            filename=self.log_file,
            level=self.log_level,
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
            force=True,
        )

def loadConfig() -> StopwatchConfig:
    dotenv.load_dotenv()
    path = os.getenv(ENV_CONFIG_PATH)
    if not path:
        return StopwatchConfig()
    try:
        config = StopwatchConfig.fromFile(path)
    except FileNotFoundError:
        log.warning('%s=%s does not exist. Using defaults.', ENV_CONFIG_PATH, path)
        return StopwatchConfig()
    log.info('Loaded config from %s', path)
    return config
