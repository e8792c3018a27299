import asyncio
import typing as tp

from textual.pilot import Pilot
from textual.widgets import Button

from stopwatch_tui.UI import UI
from stopwatch_tui.clock import ManualClock
from stopwatch_tui.config import StopwatchConfig
from stopwatch_tui.engine import TimerEngine

Scenario = tp.Callable[[UI, ManualClock, Pilot], tp.Coroutine[tp.Any, tp.Any, None]]

def runScenario(scenario: Scenario) -> None:
    clock = ManualClock(50.0)
    app = UI(TimerEngine(now=clock), StopwatchConfig(title='Test'))
    async def main():
        async with app.run_test() as pilot:
            await scenario(app, clock, pilot)
    asyncio.run(main())

def enabled(app: UI) -> dict[str, bool]:
    return {
        name: not app.query_one(f'#{name}-btn', Button).disabled
        for name in ('start', 'pause', 'resume', 'reset', 'stop')
    }

def test_initial_display():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        assert app.title == 'Test'
        assert app.time_text == '00:00:00'
        assert app.status_line.render() == 'Status: Ready'
        assert enabled(app) == dict(
            start=True, pause=False, resume=False, reset=False, stop=False,
        )
    runScenario(scenario)

def test_full_cycle_with_keys():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        await pilot.press('s')
        await pilot.pause()
        assert app.engine.isRunning()
        assert app.status_line.render() == 'Status: Running'

        clock.advance(5.0)
        await pilot.press('p')
        await pilot.pause()
        assert app.time_text == '00:00:05'
        assert app.status_line.render() == 'Status: Paused at 00:00:05'
        assert enabled(app) == dict(
            start=False, pause=False, resume=True, reset=True, stop=True,
        )

        clock.advance(30.0)
        await pilot.press('r')
        await pilot.pause()
        assert app.status_line.render() == 'Status: Running'

        clock.advance(2.0)
        await pilot.press('x')
        await pilot.pause()
        assert not app.engine.isRunning()
        assert app.status_line.render() == 'Status: Stopped at 00:00:07'
        assert app.time_text == '00:00:07'

        await pilot.press('backspace')
        await pilot.pause()
        assert app.time_text == '00:00:00'
        assert app.status_line.render() == 'Status: Reset to 00:00:00'
        assert enabled(app)['start']
    runScenario(scenario)

def test_unavailable_commands_are_ignored():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        await pilot.press('p')
        await pilot.press('r')
        await pilot.press('x')
        await pilot.press('backspace')
        await pilot.pause()
        assert app.status_line.render() == 'Status: Ready'
        assert not app.engine.isRunning()

        await pilot.press('s')
        await pilot.pause()
        clock.advance(3.0)
        await pilot.press('s')
        await pilot.pause()
        assert app.engine.elapsedSeconds() == 3.0
    runScenario(scenario)

def test_tick_refreshes_running_display():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        await pilot.press('s')
        await pilot.pause()
        clock.advance(61.0)
        app.tick()
        await pilot.pause()
        assert app.time_text == '00:01:01'
        assert enabled(app)['stop']
    runScenario(scenario)

def test_start_button_click():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        await pilot.click('#start-btn')
        await pilot.pause()
        assert app.engine.isRunning()
        assert enabled(app)['pause']
    runScenario(scenario)

def isPolling(app: UI) -> bool:
    assert app.poller is not None
    return app.poller._active.is_set()

def test_poller_follows_running_state():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        assert not isPolling(app)

        await pilot.press('s')
        await pilot.pause()
        assert isPolling(app)

        clock.advance(4.0)
        await pilot.press('p')
        await pilot.pause()
        assert not isPolling(app)
        clock.advance(10.0)
        app.tick()
        assert app.time_text == '00:00:04'

        await pilot.press('r')
        await pilot.pause()
        assert isPolling(app)

        clock.advance(1.0)
        await pilot.press('x')
        await pilot.pause()
        assert not isPolling(app)
        clock.advance(10.0)
        app.tick()
        assert app.time_text == '00:00:05'

        await pilot.press('r')
        await pilot.pause()
        assert isPolling(app)
        await pilot.press('backspace')
        await pilot.pause()
        assert not isPolling(app)
        assert app.time_text == '00:00:00'
    runScenario(scenario)

def test_stop_while_paused_relabels():
    async def scenario(app: UI, clock: ManualClock, pilot: Pilot) -> None:
        await pilot.press('s')
        await pilot.pause()
        clock.advance(2.0)
        await pilot.press('p')
        await pilot.pause()
        assert app.status_line.render() == 'Status: Paused at 00:00:02'
        assert enabled(app)['stop']

        clock.advance(5.0)
        await pilot.press('x')
        await pilot.pause()
        assert not app.engine.isRunning()
        assert app.engine.elapsedSeconds() == 2.0
        assert app.status_line.render() == 'Status: Stopped at 00:00:02'
    runScenario(scenario)
