import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

MINT_CSS = """
/* mint utilities */
.btn{color:red;padding:2px;}
.card {
  border: 1px solid #eee;
  border-radius: 4px;
}
.a.b { color: blue; }
.hidden { }
"""


@pytest.fixture
def make_package(tmp_path):
    """Install a fake npm package with a stylesheet under tmp_path/node_modules."""
    def _make(package_name='@groww-tech/mint-css', css=MINT_CSS, relative='index.css'):
        package_path = tmp_path / 'node_modules' / package_name
        css_path = package_path / relative
        css_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_text(css, encoding='utf-8')
        return css_path
    return _make
