"""
Smoke tests to verify all modules can be imported.
"""

def test_import_events():
    import events
    assert hasattr(events, '__version__')


def test_import_store():
    import store
    assert hasattr(store, '__version__')


def test_import_loader():
    import loader
    assert hasattr(loader, '__version__')


def test_import_console():
    import console
    assert hasattr(console, '__version__')
