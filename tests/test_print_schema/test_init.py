"""Test module for print_schema package initialization."""


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import print_schema

    assert print_schema.__version__ == "0.1.0"
    assert print_schema.__author__ == "Print Schema Team"


def test_package_all_exports() -> None:
    """Every name in __all__ is importable from the package."""
    import print_schema

    for name in print_schema.__all__:
        assert hasattr(print_schema, name), name


def test_level_one_functions() -> None:
    """Test that the simple functions are exposed at top level."""
    from print_schema import parse, parse_capabilities, parse_file, parse_ticket, to_xml

    assert all(callable(f) for f in (parse, parse_file, parse_capabilities, parse_ticket, to_xml))
