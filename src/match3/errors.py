class Match3Error(RuntimeError):
    """Base class for errors raised by the match3 engine."""
    pass


class GeneratorExhausted(Match3Error):
    """A scripted generator was asked for a piece after its queue ran dry."""
    pass


class CascadeLimitExceeded(Match3Error):
    """A move needed more resolution passes than the board's cascade cap allows."""

    def __init__(self, passes: int):
        super().__init__(f"Cascade did not settle within {passes} passes")
        self.passes = passes
