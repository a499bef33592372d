"""Basic import tests to verify package structure."""


def test_import_larvasim():
    """Verify main package imports."""
    import larvasim
    assert larvasim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from larvasim import core
    assert hasattr(core, "Larva")
    assert hasattr(core, "ColonyScheduler")


def test_import_observers():
    """Verify observers module structure exists."""
    from larvasim import observers
    assert hasattr(observers, "__doc__")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from larvasim import analysis
    assert hasattr(analysis, "__doc__")
