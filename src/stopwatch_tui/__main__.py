from .UI import UI
from .engine import TimerEngine
from .config import loadConfig

def main() -> None:
    config = loadConfig()
    config.configureLogging()
    engine = TimerEngine(now=config.makeTimeSource())
    UI(engine, config).run()

if __name__ == "__main__":
    main()
