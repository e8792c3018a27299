from textual import on
from textual.reactive import reactive
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Static

from .engine import TimerEngine
from .config import StopwatchConfig
from .shared import ControlAvailability, Status, ZERO_TIME, titled

COMMANDS = ('start', 'pause', 'resume', 'reset', 'stop')

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("s", "start", "Start"),
        Binding("p", "pause", "Pause"),
        Binding("r", "resume", "Resume"),
        Binding("backspace", "reset", "Reset"),
        Binding("x", "stop", "Stop"),
        Binding("q", "quit", "Quit"),
    ]

    time_text: reactive[str] = reactive(ZERO_TIME, init=False)
    status_line: reactive[Status.Base] = reactive(Status.Ready(), init=False)

    def __init__(
        self,
        engine: TimerEngine,
        stopwatch_config: StopwatchConfig | None = None,
    ) -> None:
        '''
        Display driver only: all timing lives in `engine`.
        The engine is polled every `poll_interval_ms` while it runs.
        '''
        super().__init__()

        self.engine = engine
        self.stopwatch_config = stopwatch_config or StopwatchConfig()
        self.poller: Timer | None = None

        self.title = self.stopwatch_config.title

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Container(id="face"):
            yield titled(
                Static(ZERO_TIME, id="time-display"), 'Elapsed',
                skip_bottom=False,
            )
            with Horizontal(id="controls"):
                yield Button("Start",  id="start-btn",  variant="success")
                yield Button("Pause",  id="pause-btn",  variant="warning")
                yield Button("Resume", id="resume-btn", variant="primary")
                yield Button("Reset",  id="reset-btn")
                yield Button("Stop",   id="stop-btn",   variant="error")
            yield Static(Status.Ready().render(), id="status")

        yield Footer()

    def on_mount(self) -> None:
        self.poller = self.set_interval(
            self.stopwatch_config.poll_interval_ms / 1000,
            self.tick, pause=True,
        )
        self.myUpdate()

    def controls(self) -> ControlAvailability:
        return ControlAvailability.fromSnapshot(self.engine.snapshot())

    def command(self, name: str) -> bool:
        if not getattr(self.controls(), name):
            self.log(f'{name} unavailable, ignored.')
            return False
        getattr(self.engine, name)()
        self.log(f'{name}: {self.engine.snapshot()}')
        return True

    @on(Button.Pressed, '#start-btn')
    def action_start(self) -> None:
        if self.command('start'):
            self.status_line = Status.Running()
        self.myUpdate()

    @on(Button.Pressed, '#pause-btn')
    def action_pause(self) -> None:
        if self.command('pause'):
            self.status_line = Status.Paused(self.engine.formattedTime())
        self.myUpdate()

    @on(Button.Pressed, '#resume-btn')
    def action_resume(self) -> None:
        if self.command('resume'):
            self.status_line = Status.Running()
        self.myUpdate()

    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        if self.command('reset'):
            self.status_line = Status.Reset()
        self.myUpdate()

    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        # the label shows the time read before stopping
        final_time = self.engine.formattedTime()
        if self.command('stop'):
            self.status_line = Status.Stopped(final_time)
        self.myUpdate()

    def tick(self) -> None:
        self.myUpdate()

    def myUpdate(self) -> None:
        snap = self.engine.snapshot()
        self.time_text = snap.formatted_time
        try:
            self.screen
        except ScreenStackError:
            return
        controls = ControlAvailability.fromSnapshot(snap)
        for name in COMMANDS:
            button: Button = self.query_one(f'#{name}-btn', Button)
            button.disabled = not getattr(controls, name)
        if self.poller is not None:
            if snap.is_running:
                self.poller.resume()
            else:
                self.poller.pause()

    def watch_time_text(self, _, new_text: str) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        display: Static = self.query_one('#time-display', Static)
        display.update(new_text)

    def watch_status_line(self, _, new_status: Status.Base) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        sStatus: Static = self.query_one('#status', Static)
        sStatus.update(new_status.render())
