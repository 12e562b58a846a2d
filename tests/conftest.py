import pytest
from vecn import VectorRegistry

@pytest.fixture
def registry():
    # Isolated from the default registry so tests can count and inspect entries
    return VectorRegistry()

@pytest.fixture
def vec3(registry):
    return registry.get(3)

@pytest.fixture
def vec2(registry):
    return registry.get(2)

@pytest.fixture
def vec4(registry):
    return registry.get(4)

@pytest.fixture
def vec5(registry):
    return registry.get(5)

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
