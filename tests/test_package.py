"""Basic tests for dumpstage package."""


def test_import_dumpstage():
    """Test that dumpstage can be imported."""
    import dumpstage

    assert hasattr(dumpstage, "__version__")
    assert dumpstage.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import dumpstage

    parts = dumpstage.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_top_level_exports():
    """Adapters and errors are importable from the package root."""
    import dumpstage

    for name in dumpstage.__all__:
        assert hasattr(dumpstage, name), name
