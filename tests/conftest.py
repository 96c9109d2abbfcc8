# tests/conftest.py
import pytest
from notas.models import Registry

@pytest.fixture
def sample_registry() -> Registry:
    """Registro cerrado con notas de todos los niveles de desempeño."""
    return Registry.from_grades([3.0, 4.8, 4.8, 1.0, 4.2])

@pytest.fixture
def empty_registry() -> Registry:
    return Registry.from_grades([])

@pytest.fixture
def feed_input(monkeypatch):
    """Reemplaza input() por una secuencia fija de respuestas y guarda los prompts."""
    prompts = []

    def _feed(answers):
        answers = iter(answers)

        def mock_input(prompt=""):
            prompts.append(prompt)
            try:
                answer = next(answers)
            except StopIteration:
                # Si se acaban las respuestas, cortamos como lo haria la consola.
                raise EOFError
            if isinstance(answer, Exception):
                raise answer
            return answer

        monkeypatch.setattr('builtins.input', mock_input)
        return prompts

    return _feed
