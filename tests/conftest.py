import pytest

from bom_normalizer.config import reset_config_manager
from bom_normalizer.normalizers import Factory, NormalizerOptions
from bom_normalizer.spec import Spec1dot1, Spec1dot2, Spec1dot3, Spec1dot4, Spec1dot5

CONFIG_ENV_VARS = (
    "BOM_SPEC_VERSION", "BOM_SORT_LISTS", "BOM_INDENT",
    "LOG_LEVEL", "LOG_FILE", "LOG_FORMAT", "LOG_MAX_SIZE", "LOG_BACKUP_COUNT", "LOG_STRUCTURED",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def factory_1_1() -> Factory:
    return Factory(Spec1dot1)


@pytest.fixture
def factory_1_2() -> Factory:
    return Factory(Spec1dot2)


@pytest.fixture
def factory_1_3() -> Factory:
    return Factory(Spec1dot3)


@pytest.fixture
def factory_1_4() -> Factory:
    return Factory(Spec1dot4)


@pytest.fixture
def factory_1_5() -> Factory:
    return Factory(Spec1dot5)


@pytest.fixture
def sorted_options() -> NormalizerOptions:
    return NormalizerOptions(sort_lists=True)


@pytest.fixture
def unsorted_options() -> NormalizerOptions:
    return NormalizerOptions()
