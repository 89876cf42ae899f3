"""Render an ExportSurface as the import line of a test file."""

from unit_test_generator.types import ExportSurface


def synthesize(
    surface: ExportSurface, binding_name: str, module_specifier: str
) -> str:
    """Build a single import declaration for the module's exports.

    >>> synthesize(ExportSurface(["bar"], True), "Foo", "./foo")
    "import Foo, { bar } from './foo';"

    A module with no exports gets a side-effect import.
    """
    # TODO: resolve name clashes between the default binding and named exports
    if surface.is_empty:
        return f"import '{module_specifier}';"

    import_clause = ""
    if surface.has_default_export:
        import_clause += binding_name
    if surface.named_exports:
        if surface.has_default_export:
            import_clause += ", "
        import_clause += "{ " + ", ".join(surface.named_exports) + " }"
    return f"import {import_clause} from '{module_specifier}';"
