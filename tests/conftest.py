import pytest

from frauth.paths import Paths


class ScriptedPrompter:
    """Answers prompts from a fixed script; records everything said."""
    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []
        self.output = []
        self.warnings = []

    def _next(self, prompt):
        self.asked.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unscripted prompt: {prompt!r}")
        return self.answers.pop(0)

    def confirm(self, prompt, default=True):
        answer = self._next(prompt)
        assert isinstance(answer, bool), f"{prompt!r} expected a yes/no answer"
        return answer

    def read_line(self, prompt):
        answer = self._next(prompt)
        assert isinstance(answer, str), f"{prompt!r} expected a text answer"
        return answer

    def say(self, message=''):
        self.output.append(message)

    def warn(self, message):
        self.warnings.append(message)


def script(name, identities=(), status=None, reinit=None):
    """Answer list for a full run: name, (label, id) pairs, optional status."""
    answers = [True]
    if reinit is not None:
        answers.append(reinit)
    answers.append(name)
    for label, value in identities:
        answers += [True, label, value]
    answers.append(False)
    if status is None:
        answers.append(False)
    else:
        answers += [True, status]
    return answers


@pytest.fixture
def paths(tmp_path):
    return Paths(tmp_path / 'data', tmp_path / 'cache')
