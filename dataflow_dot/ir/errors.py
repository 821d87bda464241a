from pathlib import Path


class DataflowError(Exception):
    """Base class for every failure surfaced to the command line."""


class InputNotFound(DataflowError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"could not find input file '{path}'")


class InputUnreadable(DataflowError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not read input file '{path}': {reason}")


class MalformedInput(DataflowError):
    pass


class OutputWriteFailed(DataflowError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"could not write output: {reason}")
