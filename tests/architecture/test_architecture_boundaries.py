"""Architecture boundary tests for the package topology.

Enforces the dependency DAG:
  web → engine, config, domain
  cli → engine, config, observability, domain
  engine → cache, config, observability, domain
  domain → (nothing outside itself, no third-party libraries)
"""

from __future__ import annotations

import ast
import importlib
import pkgutil
from pathlib import Path
from typing import List, Set

REPO_ROOT = Path(__file__).resolve().parents[2]
SOURCE_ROOT = REPO_ROOT / "resume_ats"
DOMAIN_ROOT = SOURCE_ROOT / "domain"

FORBIDDEN_IN_DOMAIN = {"fastapi", "pydantic", "rich", "starlette", "uvicorn", "yaml"}


def _imports(file_path: Path) -> List[ast.AST]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    return [node for node in ast.walk(tree) if isinstance(node, (ast.Import, ast.ImportFrom))]


def _top_level_modules(node: ast.AST) -> Set[str]:
    if isinstance(node, ast.Import):
        return {alias.name.split(".")[0] for alias in node.names}
    if isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
        return {node.module.split(".")[0]}
    return set()


def test_domain_is_pure() -> None:
    violations: List[str] = []
    for py_file in sorted(DOMAIN_ROOT.rglob("*.py")):
        rel = py_file.relative_to(REPO_ROOT)
        for node in _imports(py_file):
            for module in _top_level_modules(node) & FORBIDDEN_IN_DOMAIN:
                violations.append(f"{rel}: imports third-party '{module}'")
            if isinstance(node, ast.ImportFrom) and node.level > 1:
                violations.append(f"{rel}: relative import escapes resume_ats.domain")
            if isinstance(node, ast.ImportFrom) and node.level == 0 and (node.module or "").startswith(
                "resume_ats."
            ) and not (node.module or "").startswith("resume_ats.domain"):
                violations.append(f"{rel}: imports {node.module}")

    assert not violations, "Architecture boundary violation(s):\n" + "\n".join(violations)


def test_web_layer_not_imported_outside_web() -> None:
    violations: List[str] = []
    for py_file in sorted(SOURCE_ROOT.rglob("*.py")):
        if (SOURCE_ROOT / "web") in py_file.parents:
            continue
        for node in _imports(py_file):
            module = getattr(node, "module", None) or ""
            names = [alias.name for alias in node.names]
            if "fastapi" in _top_level_modules(node) or module.startswith("resume_ats.web") or (
                isinstance(node, ast.ImportFrom) and node.level >= 1 and (module.startswith("web") or "web" in names)
            ):
                violations.append(f"{py_file.relative_to(REPO_ROOT)}: depends on the web layer")

    assert not violations, "Architecture boundary violation(s):\n" + "\n".join(violations)


def test_every_module_imports() -> None:
    import resume_ats

    failures: List[str] = []
    for module in pkgutil.walk_packages(resume_ats.__path__, prefix="resume_ats."):
        try:
            importlib.import_module(module.name)
        except ImportError as e:
            failures.append(f"{module.name}: {e}")

    assert not failures, "Unimportable module(s):\n" + "\n".join(failures)


def test_web_app_mounts_api_routes() -> None:
    from resume_ats.config import EngineConfig
    from resume_ats.web.app import create_app

    paths = {route.path for route in create_app(EngineConfig()).routes}
    assert {"/api/v1/score", "/api/v1/resumes/{resume_id}/export-check"} <= paths
