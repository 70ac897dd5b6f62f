#!/usr/bin/env python3
"""
Run All Examples - fpds

Runs every example script in sequence with timing, error handling and a
summary report.

Run: python examples/run_all_examples.py
"""

import importlib.util
import sys
import time
import traceback
from pathlib import Path
from typing import Any

EXAMPLES = [
    ("List Usage", "list_usage.py"),
    ("Tree Usage", "tree_usage.py"),
]


class ExampleRunner:
    """Manages execution of all example scripts."""

    def __init__(self) -> None:
        self.results: list[dict[str, Any]] = []
        self.examples_dir = Path(__file__).parent

    def run_example(self, example_name: str, module_path: Path) -> dict[str, Any]:
        """Run a single example script and capture the result."""
        print(f"\n{'='*60}")
        print(f"🚀 RUNNING: {example_name}")
        print(f"{'='*60}")

        start_time = time.time()

        try:
            spec = importlib.util.spec_from_file_location(module_path.stem, module_path)
            module = importlib.util.module_from_spec(spec)  # type: ignore[arg-type]
            spec.loader.exec_module(module)  # type: ignore[union-attr]
            module.main()

            return {
                'name': example_name,
                'status': 'success',
                'duration': time.time() - start_time,
                'error': None
            }

        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"❌ ERROR in {example_name}: {error_msg}")
            traceback.print_exc()

            return {
                'name': example_name,
                'status': 'failed',
                'duration': time.time() - start_time,
                'error': error_msg
            }

    def run_all_examples(self) -> bool:
        """Run all examples; True when every one succeeded."""
        for name, filename in EXAMPLES:
            self.results.append(self.run_example(name, self.examples_dir / filename))

        self.print_summary()
        return all(r['status'] == 'success' for r in self.results)

    def print_summary(self) -> None:
        print(f"\n{'='*60}")
        print("📊 EXAMPLE SUMMARY")
        print(f"{'='*60}")

        for i, result in enumerate(self.results, 1):
            status_icon = '✅' if result['status'] == 'success' else '❌'
            print(f"  {i}. {result['name']}: {status_icon} {result['status']} "
                  f"({result['duration']:.2f}s)")
            if result['error']:
                print(f"     Error: {result['error']}")


def main() -> None:
    runner = ExampleRunner()
    if not runner.run_all_examples():
        sys.exit(1)


if __name__ == "__main__":
    main()
