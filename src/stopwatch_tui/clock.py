'''
A time source is any zero-arg callable returning seconds as a float.  
Only differences between two readings are meaningful.  
'''

import time
import typing as tp

TimeSource = tp.Callable[[], float]

SYSTEM_CLOCKS: dict[str, TimeSource] = {
    'monotonic': time.monotonic,
    'wall': time.time,
}

class ManualClock:
    '''
    Only moves when told to. For tests and demos.  
    '''
    def __init__(self, start: float = 0.0) -> None:
        self.t = start
    
    def __call__(self) -> float:
        return self.t
    
    def advance(self, seconds: float) -> None:
        self.t += seconds
    
    def set(self, t: float) -> None:
        # may go backwards, like a wall clock being corrected
        self.t = t
