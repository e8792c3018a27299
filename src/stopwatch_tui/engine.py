from __future__ import annotations

import logging
import threading
import time

from .clock import TimeSource
from .shared import EngineSnapshot, formatHMS

log = logging.getLogger(__name__)

class TimerEngine:
    '''
    Elapsed-time state machine: Stopped <-> Running.  
    Every command is total. Unmet preconditions make it a silent no-op.  
    Thread-safe; one lock guards all reads and writes.  
    '''
    def __init__(self, now: TimeSource = time.monotonic) -> None:
        self.now = now
        self.lock = threading.Lock()

        self.reference_instant = now()
        self.accumulated = 0.0
        self.is_running = False
    
    def start(self) -> None:
        with self.lock:
            if self.is_running:
                log.debug('start ignored: already running')
                return
            self.reference_instant = self.now()
            self.accumulated = 0.0
            self.is_running = True
            log.debug('started')
    
    def pause(self) -> None:
        with self.lock:
            if not self.is_running:
                log.debug('pause ignored: not running')
                return
            self.bankSegment()
            log.debug('paused at %.3f s', self.accumulated)
    
    def resume(self) -> None:
        with self.lock:
            if self.is_running or self.accumulated <= 0.0:
                log.debug(
                    'resume ignored: running=%s, accumulated=%.3f', 
                    self.is_running, self.accumulated, 
                )
                return
            self.reference_instant = self.now()
            self.is_running = True
            log.debug('resumed from %.3f s', self.accumulated)
    
    def reset(self) -> None:
        with self.lock:
            self.reference_instant = self.now()
            self.accumulated = 0.0
            self.is_running = False
            log.debug('reset')
    
    def stop(self) -> None:
        # Same transition as pause. "Stopped" vs "Paused" is only a UI label.
        with self.lock:
            if not self.is_running:
                log.debug('stop ignored: not running')
                return
            self.bankSegment()
            log.debug('stopped at %.3f s', self.accumulated)
    
    def isRunning(self) -> bool:
        with self.lock:
            return self.is_running
    
    def elapsedSeconds(self) -> float:
        with self.lock:
            return self.elapsedUnlocked()
    
    def formattedTime(self) -> str:
        return formatHMS(self.elapsedSeconds())
    
    def snapshot(self) -> EngineSnapshot:
        with self.lock:
            elapsed = self.elapsedUnlocked()
            is_running = self.is_running
        return EngineSnapshot(
            is_running=is_running,
            elapsed_seconds=elapsed,
            formatted_time=formatHMS(elapsed),
        )
    
    def segmentUnlocked(self) -> float:
        # a wall clock may step backwards
        return max(0.0, self.now() - self.reference_instant)
    
    def elapsedUnlocked(self) -> float:
        if self.is_running:
            return self.accumulated + self.segmentUnlocked()
        return self.accumulated
    
    def bankSegment(self) -> None:
        self.accumulated += self.segmentUnlocked()
        self.is_running = False
