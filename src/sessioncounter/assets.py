"""
Stylesheet build

Compiles the Tailwind source into the served ``style.css``. This is a
build-time step: the package ships a pre-built stylesheet, so the server runs
without Node installed.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_STATIC_DIR

logger = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[2]
TAILWIND_CONFIG = PROJECT_DIR / "tailwind.config.js"
TAILWIND_INPUT = PROJECT_DIR / "styles" / "input.css"


class StylesheetBuildError(RuntimeError):
    """Raised when the Tailwind CLI is missing or exits non-zero."""


def tailwind_command(npx: str, source: Path, output: Path, config_file: Path, minify: bool = True):
    cmd = [npx, "tailwindcss", "-c", str(config_file), "-i", str(source), "-o", str(output)]
    if minify:
        cmd.append("--minify")
    return cmd


def build_stylesheet(
    output: Optional[Union[str, Path]] = None,
    source: Union[str, Path] = TAILWIND_INPUT,
    config_file: Union[str, Path] = TAILWIND_CONFIG,
    minify: bool = True,
) -> Path:
    """Run ``npx tailwindcss`` and return the path of the written stylesheet."""
    output = Path(output) if output else DEFAULT_STATIC_DIR / "style.css"
    # the Tailwind sources live in the source checkout, not in an installed wheel
    for required in (Path(config_file), Path(source)):
        if not required.is_file():
            raise StylesheetBuildError(f"Tailwind source file not found: {required}")

    npx = shutil.which("npx")
    if npx is None:
        raise StylesheetBuildError("npx not found on PATH; install Node.js to build the stylesheet")

    cmd = tailwind_command(npx, Path(source), output, Path(config_file), minify=minify)
    logger.info("Building stylesheet: %s", " ".join(cmd))
    result = subprocess.run(cmd, cwd=str(PROJECT_DIR), capture_output=True, text=True)

    if result.returncode != 0:
        raise StylesheetBuildError(
            f"tailwindcss exited with code {result.returncode}: {result.stderr.strip()}"
        )
    logger.info("Wrote %s", output)
    return output
