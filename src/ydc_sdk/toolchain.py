"""
C Toolchain Driver
==================

Hands translated C to an external C compiler. The translator has no
knowledge of this stage; it only sees success or failure.

    C text → write .c file → cc -o output file.c → executable

Usage
-----
>>> from ydc_sdk.toolchain import build_executable, ToolchainOptions
>>> build_executable(c_text, "hello.c", "hello", ToolchainOptions(cc="clang"))
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import shutil
import subprocess

from ydc_sdk.errors import CompilerNotFoundError, CompilationFailedError

logger = logging.getLogger(__name__)


DEFAULT_CC = "gcc"


@dataclass
class ToolchainOptions:
    """
    External compiler configuration.

    Attributes:
        cc: Compiler executable name or path
        cflags: Extra arguments placed before "-o"
        timeout: Seconds to wait for the compiler
    """
    cc: str = DEFAULT_CC
    cflags: list[str] = field(default_factory=list)
    timeout: float = 60.0


@dataclass
class ToolchainResult:
    """Outcome of a successful compiler run."""
    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""


def find_compiler(cc: str = DEFAULT_CC) -> str:
    """
    Resolve a compiler name to an executable path.

    Raises:
        CompilerNotFoundError: If the compiler is not on PATH
    """
    path = shutil.which(cc)
    if path is None:
        raise CompilerNotFoundError(cc)
    return path


def build_executable(
    c_source: str,
    c_path: str | Path,
    output_path: str | Path,
    options: Optional[ToolchainOptions] = None,
) -> ToolchainResult:
    """
    Write C source to disk and compile it into an executable.

    Args:
        c_source: Translated C text
        c_path: Where to write the .c file
        output_path: Executable to produce
        options: Compiler configuration (defaults if None)

    Returns:
        ToolchainResult for the compiler run

    Raises:
        CompilerNotFoundError: If the compiler cannot be found
        CompilationFailedError: If the compiler fails or times out
    """
    options = options or ToolchainOptions()
    c_path = Path(c_path)
    output_path = Path(output_path)

    c_path.write_text(c_source, encoding="utf-8")
    logger.debug(f"Wrote {len(c_source)} characters to {c_path}")

    cc = find_compiler(options.cc)
    cmd = [cc, *options.cflags, "-o", str(output_path), str(c_path)]
    logger.info(f"Running {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=options.timeout,
        )
    except subprocess.TimeoutExpired:
        logger.error(f"{options.cc} timed out after {options.timeout}s")
        raise CompilationFailedError(
            f"{options.cc} timed out after {options.timeout}s",
            command=cmd,
        )
    except FileNotFoundError:
        raise CompilerNotFoundError(options.cc)

    if result.returncode != 0:
        logger.error(f"{options.cc} exited with status {result.returncode}")
        raise CompilationFailedError(
            f"C compilation failed (exit status {result.returncode})",
            command=cmd,
            returncode=result.returncode,
            stderr=result.stderr,
        )

    return ToolchainResult(
        command=cmd,
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )
