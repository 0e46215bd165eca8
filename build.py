#!/usr/bin/env python3
"""
Build script for the locedit CLI binary.
Creates a standalone executable for the current platform with PyInstaller.

Usage:
    python build.py          # Build for current platform
    python build.py --clean  # Clean build artifacts first
"""

import argparse
import platform
import shutil
import subprocess
import sys
from pathlib import Path


def get_platform_name() -> str:
    """Get platform identifier for binary naming."""
    system = platform.system().lower()
    machine = platform.machine().lower()

    if system == "darwin":
        if machine == "arm64":
            return "macos-arm64"
        return "macos-x64"
    elif system == "linux":
        if machine == "aarch64":
            return "linux-arm64"
        return "linux-x64"
    else:
        return f"{system}-{machine}"


def clean_build_artifacts(project_root: Path) -> None:
    """Remove build artifacts."""
    for dir_name in ["build", "dist"]:
        dir_path = project_root / dir_name
        if dir_path.exists():
            print(f"Removing {dir_path}")
            shutil.rmtree(dir_path)

    for pycache in project_root.rglob("__pycache__"):
        print(f"Removing {pycache}")
        shutil.rmtree(pycache)


def build_binary(project_root: Path) -> Path:
    """Build the binary using PyInstaller."""
    entry_point = project_root / "locedit_main.py"

    print(f"Building locedit for {get_platform_name()}...")
    print("-" * 50)

    cmd = [
        sys.executable, "-m", "PyInstaller",
        "--clean",
        "--noconfirm",
        "--onefile",
        "--name", "locedit",
        str(entry_point),
    ]

    result = subprocess.run(cmd, cwd=project_root)

    if result.returncode != 0:
        print("Error: PyInstaller build failed")
        sys.exit(1)

    binary_path = project_root / "dist" / "locedit"
    if not binary_path.exists():
        print(f"Error: Binary not found at {binary_path}")
        sys.exit(1)

    final_path = binary_path.with_name(f"locedit-{get_platform_name()}")
    if final_path.exists():
        final_path.unlink()

    binary_path.rename(final_path)
    final_path.chmod(0o755)

    print("-" * 50)
    print(f"Binary built: {final_path}")
    print(f"  Size: {final_path.stat().st_size / 1024 / 1024:.1f} MB")

    return final_path


def main():
    parser = argparse.ArgumentParser(description="Build locedit binary")
    parser.add_argument("--clean", action="store_true", help="Clean build artifacts first")
    args = parser.parse_args()

    project_root = Path(__file__).parent.absolute()

    if args.clean:
        clean_build_artifacts(project_root)

    binary_path = build_binary(project_root)

    print()
    print("To test the binary:")
    print(f"  {binary_path} --help")


if __name__ == "__main__":
    main()
