#!/usr/bin/env python3
"""
Validate that test_scenarios_business_summary.md stays in sync with test_integration_scenarios.py.

Checks that every scenario class and method is documented, and reports
documented scenarios that no longer exist.

Run: python scripts/validate_test_docs_sync.py
"""

import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
TEST_FILE = PROJECT_ROOT / 'tests' / 'test_integration_scenarios.py'
DOC_FILE = PROJECT_ROOT / 'docs' / 'test_scenarios_business_summary.md'


CLASS_OR_METHOD = re.compile(r'^(?:class (Test\w+)|[ \t]+def (test_\w+))', re.MULTILINE)
DOC_MARKER = re.compile(r'\*\*Test (Class|Method)\*\*:\s*`(\w+)`')


def extract_test_classes_and_methods(test_file: Path) -> dict[str, list[str]]:
    """Map each scenario class to the test methods defined under it."""
    classes = {}
    current = None

    for class_name, method_name in CLASS_OR_METHOD.findall(test_file.read_text()):
        if class_name:
            current = classes.setdefault(class_name, [])
        elif current is not None:
            current.append(method_name)

    return classes


def extract_documented_tests(doc_file: Path) -> tuple[set[str], set[str]]:
    """Collect the class and method names tagged in the business summary."""
    documented = {"Class": set(), "Method": set()}
    for kind, name in DOC_MARKER.findall(doc_file.read_text()):
        documented[kind].add(name)
    return documented["Class"], documented["Method"]


def find_sync_problems(test_file: Path, doc_file: Path) -> tuple[list[str], list[str]]:
    """Return (errors, warnings) describing drift between tests and docs."""
    test_classes = extract_test_classes_and_methods(test_file)
    doc_classes, doc_methods = extract_documented_tests(doc_file)

    all_test_methods = set()
    for methods in test_classes.values():
        all_test_methods.update(methods)

    errors = [f"Missing class documentation: {c}" for c in set(test_classes) - doc_classes]
    errors += [f"Missing method documentation: {m}" for m in all_test_methods - doc_methods]
    warnings = [f"Documented class no longer exists: {c}" for c in doc_classes - set(test_classes)]
    warnings += [f"Documented method no longer exists: {m}" for m in doc_methods - all_test_methods]

    return sorted(errors), sorted(warnings)


def main():
    for path in (TEST_FILE, DOC_FILE):
        if not path.exists():
            print(f"File not found: {path}")
            sys.exit(1)

    errors, warnings = find_sync_problems(TEST_FILE, DOC_FILE)

    print("=" * 60)
    print("Test Documentation Sync Validation")
    print("=" * 60)

    if errors:
        print(f"\nERRORS ({len(errors)}):")
        for error in errors:
            print(f"   - {error}")

    if warnings:
        print(f"\nWARNINGS ({len(warnings)}):")
        for warning in warnings:
            print(f"   - {warning}")

    if not errors and not warnings:
        print("\nAll scenarios are documented and in sync.")

    sys.exit(1 if errors else 0)


if __name__ == '__main__':
    main()
