import pathlib
import sys

import pytest

# make `import skriv` work without installing the package
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

from skriv.core.i18n import DiagnosticCollector, build_catalog


@pytest.fixture
def collector():
    return DiagnosticCollector()


@pytest.fixture
def en_catalog():
    return build_catalog({
        "items": {"one": "{{count}} item", "other": "{{count}} items"},
        "greeting": "Hello, {{name}}!",
        "pair": "{{a}} and {{a}}",
        "empty": "",
        "broken": 42,
    }, "en")


@pytest.fixture
def nb_catalog():
    return build_catalog({
        "items": {"one": "{{count}} ting", "other": "{{count}} ting"},
        "greeting": "Hei, {{name}}!",
        "only_nb": "Bare på bokmål",
        "radar": {"tooltip": "«{{word}}» brukes {{count}} ganger"},
    }, "nb")
