from __future__ import annotations


class SuiteError(Exception):
    """Base class for errors raised while running a suite."""


class NoFactsError(SuiteError):
    pass


class StepFailed(SuiteError):
    def __init__(self, step_name: str, index: int):
        super().__init__(f'Step #{index} "{step_name}" failed')
        self.step_name = step_name
        self.index = index
