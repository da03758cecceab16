import subprocess
import shutil
import os
import sys

def _run_pytest(*args: str) -> None:
    result = subprocess.run([sys.executable, "-m", "pytest", *args], check=False)
    sys.exit(result.returncode)

def run_unit_tests():
    """Run unit tests in sqlfragment/tests."""
    print("Running unit tests...")
    _run_pytest("sqlfragment/tests")

def run_integration_tests():
    """Run the SQLite integration tests in tests/."""
    print("Running integration tests...")
    _run_pytest("tests")

def run_all_tests():
    """Run all tests (unit + integration)."""
    print("Running all tests...")
    _run_pytest()

def clean_project():
    """Remove generated folders like __pycache__, .pytest_cache and build output."""
    folders_to_remove = [
        ".pytest_cache",
        "build",
        "dist",
        "sqlfragment.egg-info",
    ]

    for root, dirs, files in os.walk("."):
        if "__pycache__" in dirs:
            folders_to_remove.append(os.path.join(root, "__pycache__"))

    print("Cleaning up project...")
    for folder in set(folders_to_remove):
        if not os.path.exists(folder):
            continue
        try:
            shutil.rmtree(folder)
            print(f"Removed: {folder}")
        except OSError as e:
            print(f"Failed to remove {folder}: {e}")

    print("Cleanup complete.")
