import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.catalog_store import ERROR, INFO, CatalogStore, Notification
from core.settings import DEFAULT_PACKAGE

class ExplodingLocator:
    def locate(self, package_name, project_root):
        raise RuntimeError("boom")

def messages(notifications):
    return [(n.level, n.message) for n in notifications]

def test_starts_with_default_package_and_empty_catalog(tmp_path):
    store = CatalogStore(tmp_path)
    assert store.package_name == DEFAULT_PACKAGE
    assert len(store.catalog) == 0

def test_load_publishes_catalog(tmp_path, make_package):
    make_package()
    store = CatalogStore(tmp_path)
    notifications = store.load()
    assert list(store.catalog) == ['btn', 'card']
    assert store.catalog['btn'] == "color:red;\npadding:2px;"
    assert messages(notifications) == [
        (INFO, f"Scanning {DEFAULT_PACKAGE} for CSS classes..."),
        (INFO, f"Loaded 2 classes from {DEFAULT_PACKAGE}"),
    ]

def test_missing_package_falls_back_to_empty_catalog(tmp_path, make_package):
    make_package()
    store = CatalogStore(tmp_path)
    store.load()
    notifications = store.set_package('ui-kit')
    assert store.package_name == 'ui-kit'
    assert len(store.catalog) == 0
    assert messages(notifications) == [
        (INFO, "Scanning ui-kit for CSS classes..."),
        (ERROR, "Package ui-kit not found in node_modules"),
        (INFO, "Loaded 0 classes from ui-kit"),
    ]

def test_no_workspace():
    store = CatalogStore(None)
    notifications = store.load()
    assert (ERROR, "No workspace folder found") in messages(notifications)
    assert len(store.catalog) == 0

def test_set_package_switches_catalog(tmp_path, make_package):
    make_package()
    make_package('ui-kit', css=".grid { display: grid; }", relative='dist/index.css')
    store = CatalogStore(tmp_path)
    store.load()
    store.set_package('ui-kit')
    assert store.package_name == 'ui-kit'
    assert dict(store.catalog) == {'grid': "display: grid;"}

@pytest.mark.parametrize('package_name', ['', '   '])
def test_blank_package_is_ignored(tmp_path, make_package, package_name):
    make_package()
    store = CatalogStore(tmp_path)
    store.load()
    assert store.set_package(package_name) == []
    assert store.package_name == DEFAULT_PACKAGE
    assert len(store.catalog) == 2

def test_reload_replaces_catalog_without_touching_old_snapshot(tmp_path, make_package):
    css_path = make_package()
    store = CatalogStore(tmp_path)
    store.load()
    snapshot = store.catalog

    css_path.write_text(".fresh { color: green; }", encoding='utf-8')
    store.load()

    assert list(snapshot) == ['btn', 'card']
    assert list(store.catalog) == ['fresh']
    assert store.catalog is not snapshot

def test_unexpected_error_keeps_previous_catalog(tmp_path, make_package):
    make_package()
    store = CatalogStore(tmp_path)
    store.load()
    previous = store.catalog

    store.locator = ExplodingLocator()
    notifications = store.load()

    assert store.catalog is previous
    assert messages(notifications)[-1] == (ERROR, f"Failed to load classes from {DEFAULT_PACKAGE}: boom")

def test_notifier_receives_every_notification(tmp_path, make_package):
    make_package()
    received = []
    store = CatalogStore(tmp_path, notifier=received.append)
    notifications = store.load()
    assert received == notifications
    assert all(isinstance(n, Notification) for n in received)

def test_unreadable_stylesheet_falls_back_to_empty_catalog(tmp_path, make_package, monkeypatch):
    from core import asset_locator

    make_package()

    def undecodable(path):
        raise UnicodeDecodeError('utf-8', b'\xff', 0, 1, 'invalid start byte')

    monkeypatch.setattr(asset_locator, 'read_file_content', undecodable)
    store = CatalogStore(tmp_path)
    notifications = store.load()

    assert len(store.catalog) == 0
    levels_and_messages = messages(notifications)
    assert levels_and_messages[1][0] == ERROR
    assert levels_and_messages[1][1].startswith(f"Error reading package {DEFAULT_PACKAGE}:")
    assert levels_and_messages[-1] == (INFO, f"Loaded 0 classes from {DEFAULT_PACKAGE}")

@pytest.mark.parametrize('package_name', ['../../outside', '/abs/path'])
def test_package_outside_node_modules_is_rejected(tmp_path, package_name):
    (tmp_path / 'outside').mkdir()
    (tmp_path / 'outside' / 'index.css').write_text(".leak { a: 1; }", encoding='utf-8')
    store = CatalogStore(tmp_path / 'project')
    notifications = store.set_package(package_name)
    assert len(store.catalog) == 0
    assert (ERROR, f"Invalid package name {package_name}") in messages(notifications)
