import pytest

from minilisp.config import Settings
from minilisp.interpreter import Interpreter
from minilisp.runtime_context import RuntimeContext
from minilisp.reader.parser import Reader
from minilisp.types.symbol import SymbolTable


# Every fixture uses explicit Settings() so that MINILISP_* variables in the
# developer's shell cannot change test outcomes.

@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def ctx(settings):
    return RuntimeContext(settings)


@pytest.fixture
def interp(settings):
    return Interpreter(settings)


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def read(symbols):
    """Read the first value of `source` with a fresh reader."""
    def _read(source):
        return Reader.from_string(source, symbols).read()
    return _read
