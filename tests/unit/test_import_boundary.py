"""Import boundary tests for the correlog layers.

Rules:
- domain/ imports NOTHING from other layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/ and application/
- bootstrap/ imports from every layer

config/ sits outside the layering and may be imported anywhere.
"""

import ast
from collections.abc import Iterator
from pathlib import Path

import pytest

PACKAGE_NAME = "correlog"
PACKAGE_DIR = Path(__file__).parent.parent.parent / PACKAGE_NAME

ALLOWED_IMPORTS: dict[str, frozenset[str]] = {
    "domain": frozenset(),
    "application": frozenset({"domain"}),
    "infrastructure": frozenset({"domain", "application"}),
    "bootstrap": frozenset({"domain", "application", "infrastructure"}),
}


def imported_layers(tree: ast.Module) -> Iterator[tuple[int, str]]:
    """Yield (line, layer) for every absolute import of a correlog layer."""
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom):
            modules = [node.module] if node.module and node.level == 0 else []
        elif isinstance(node, ast.Import):
            modules = [alias.name for alias in node.names]
        else:
            continue
        for module in modules:
            package, _, rest = module.partition(".")
            layer = rest.partition(".")[0]
            if package == PACKAGE_NAME and layer in ALLOWED_IMPORTS:
                yield node.lineno, layer


def find_violations(package_dir: Path) -> list[str]:
    """Return "path:line: message" for every cross-layer import not allowed."""
    violations: list[str] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        layer = py_file.relative_to(package_dir).parts[0]
        if layer not in ALLOWED_IMPORTS:
            continue
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
        for line, target in imported_layers(tree):
            if target != layer and target not in ALLOWED_IMPORTS[layer]:
                violations.append(
                    f"{py_file}:{line}: {layer} layer cannot import from {target}"
                )
    return violations


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """Empty package with one directory per layer."""
    root = tmp_path / PACKAGE_NAME
    for layer in ALLOWED_IMPORTS:
        (root / layer).mkdir(parents=True)
        (root / layer / "__init__.py").write_text("")
    return root


class TestImportedLayers:
    def test_from_import(self) -> None:
        tree = ast.parse("from correlog.domain.models import TraceEvent")
        assert list(imported_layers(tree)) == [(1, "domain")]

    def test_import_statement_with_several_names(self) -> None:
        tree = ast.parse("import os, correlog.application.ports")
        assert list(imported_layers(tree)) == [(1, "application")]

    def test_relative_and_foreign_imports_are_ignored(self) -> None:
        tree = ast.parse(
            "from . import sibling\n"
            "import structlog\n"
            "from correlog.config import LoggingConfig\n"
        )
        assert list(imported_layers(tree)) == []


class TestFindViolations:
    def test_domain_may_import_stdlib(self, package_dir: Path) -> None:
        (package_dir / "domain" / "module.py").write_text(
            "import threading\nfrom contextvars import ContextVar\n"
        )
        assert find_violations(package_dir) == []

    def test_domain_importing_application(self, package_dir: Path) -> None:
        (package_dir / "domain" / "module.py").write_text(
            "from correlog.application.ports import EventSinkProtocol\n"
        )

        (violation,) = find_violations(package_dir)

        assert violation.endswith("module.py:1: domain layer cannot import from application")

    def test_application_importing_infrastructure(self, package_dir: Path) -> None:
        (package_dir / "application" / "module.py").write_text(
            "from correlog.domain.errors import InvalidArgumentError\n"
            "from correlog.infrastructure.adapters import TraceSource\n"
        )

        (violation,) = find_violations(package_dir)

        assert ":2: application layer cannot import from infrastructure" in violation

    def test_bootstrap_may_import_everything(self, package_dir: Path) -> None:
        (package_dir / "bootstrap" / "module.py").write_text(
            "import correlog.domain\n"
            "import correlog.application\n"
            "import correlog.infrastructure\n"
            "import correlog.config\n"
        )
        assert find_violations(package_dir) == []

    def test_config_is_not_checked(self, package_dir: Path) -> None:
        (package_dir / "config").mkdir()
        (package_dir / "config" / "module.py").write_text("import correlog.bootstrap\n")
        assert find_violations(package_dir) == []


class TestRealPackage:
    def test_package_has_no_violations(self) -> None:
        assert find_violations(PACKAGE_DIR) == []
