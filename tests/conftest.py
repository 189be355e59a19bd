"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
import textwrap
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local defhint package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of defhint modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("defhint"):
        del sys.modules[module_name]

LIBRARY_MODULE = textwrap.dedent(
    '''\
    def helper(value, scale=2):
        """Scale a value."""
        return value * scale


    class crshSession:
        """Session wrapper."""

        def __init__(self, name, retries: int = 3):
            pass

        def send(self, payload, sep=", "):
            pass
    '''
)


@pytest.fixture
def no_global(tmp_path: Path) -> Generator[None, None, None]:
    """Point the global config at a file that does not exist."""
    with patch("defhint.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Project with ``cslib/main.py`` and an ``app/`` directory of scripts."""
    root = tmp_path / "project"
    (root / "cslib").mkdir(parents=True)
    (root / "cslib" / "main.py").write_text(LIBRARY_MODULE)
    (root / "app").mkdir()
    return root
