from __future__ import annotations

from dataclasses import dataclass
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field
from textual.widget import Widget

ZERO_TIME = '00:00:00'

def formatHMS(seconds: float) -> str:
    '''
    Truncates to whole seconds.  
    100+ hours widens the hour field beyond two digits.  
    '''
    s = int(seconds)
    hours, s = divmod(s, 3600)
    minutes, s = divmod(s, 60)
    return f'{hours:02d}:{minutes:02d}:{s:02d}'

class EngineSnapshot(BaseModel):
    is_running: bool
    elapsed_seconds: float = Field(ge=0.0)
    formatted_time: str

    model_config = ConfigDict(
        frozen=True,
    )

@dataclass(frozen=True)
class ControlAvailability:
    start: bool
    pause: bool
    resume: bool
    reset: bool
    stop: bool

    @classmethod
    def fromSnapshot(cls, snap: EngineSnapshot) -> ControlAvailability:
        has_time = snap.elapsed_seconds > 0.0
        return cls(
            start  = not snap.is_running and not has_time,
            pause  = snap.is_running,
            resume = not snap.is_running and has_time,
            reset  = has_time,
            stop   = has_time,
        )

class Status:
    class Base(ABC):
        @abstractmethod
        def render(self) -> str:
            raise NotImplementedError()
    
    @dataclass(frozen=True)
    class Ready(Base):
        def render(self) -> str:
            return 'Status: Ready'
    
    @dataclass(frozen=True)
    class Running(Base):
        def render(self) -> str:
            return 'Status: Running'
    
    @dataclass(frozen=True)
    class Paused(Base):
        at: str

        def render(self) -> str:
            return f'Status: Paused at {self.at}'
    
    @dataclass(frozen=True)
    class Stopped(Base):
        at: str

        def render(self) -> str:
            return f'Status: Stopped at {self.at}'
    
    @dataclass(frozen=True)
    class Reset(Base):
        def render(self) -> str:
            return f'Status: Reset to {ZERO_TIME}'

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
