"""
ydcc - YDC Compiler Command-Line Interface
==========================================

This module implements the command-line interface for the YDC toolchain.
It translates a YDC source file to C and, unless told otherwise, builds
the C file into an executable with the system C compiler.

    ┌───────────┐        ┌──────────┐        ┌────────────┐
    │ .ydc file │───────▶│  .c file │───────▶│ executable │
    │ (source)  │ ydcc   │          │ gcc    │  (output)  │
    └───────────┘        └──────────┘        └────────────┘

Usage Examples
--------------
Build an executable (hello.ydc → hello.c → hello):
    $ ydcc hello.ydc

Translate only:
    $ ydcc -S hello.ydc

Print the translation:
    $ ydcc -E hello.ydc

Use another compiler:
    $ CC=clang ydcc hello.ydc -o hello --cflag=-O2

Exit Codes
----------
0 - Success
1 - Build failed (translation or C compilation error)
2 - Invalid arguments or file not found
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ydc_sdk import __version__
from ydc_sdk.cli.errors import handle_cli_exception
from ydc_sdk.toolchain import DEFAULT_CC, ToolchainOptions, build_executable
from ydc_sdk.transpiler import Transpiler, TranspilerOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def resolve_output_paths(
    input_file: Path,
    output: Optional[Path],
    c_output: Optional[Path],
) -> tuple[Path, Path]:
    """
    Work out the executable and C file paths.

    Defaults: hello.ydc → hello (executable) and hello.c (C source).
    Neither default may overwrite the source: an input without a suffix
    gets an executable named <input>.out, and an input already ending in
    .c gets a C file named <input>.c (prog.c → prog.c.c).

    Returns:
        Tuple of (executable_path, c_path)
    """
    if output is None:
        output = input_file.with_suffix("")
        if output == input_file:
            output = input_file.with_suffix(".out")

    if c_output is None:
        c_output = input_file.with_suffix(".c")
        if c_output == input_file:
            c_output = input_file.with_name(f"{input_file.name}.c")

    return output, c_output


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Executable to build (default: input without suffix)",
)
@click.option(
    "-c", "--c-output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generated C file (default: input.c)",
)
@click.option(
    "-S", "--translate-only",
    is_flag=True,
    help="Write the C file and stop",
)
@click.option(
    "-E", "--print-c",
    is_flag=True,
    help="Print the translated C to stdout and stop",
)
@click.option(
    "--cc",
    envvar="CC",
    default=DEFAULT_CC,
    show_default=True,
    help="C compiler to invoke (also read from $CC)",
)
@click.option(
    "--cflag",
    "cflags",
    multiple=True,
    help="Extra argument for the C compiler (can be repeated)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat unknown characters in the source as errors",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="ydcc")
def main(
    input_file: Path,
    output: Optional[Path],
    c_output: Optional[Path],
    translate_only: bool,
    print_c: bool,
    cc: str,
    cflags: tuple[str, ...],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Translate a YDC program to C and build it.

    INPUT_FILE is the YDC source file (.ydc) to compile.

    \b
    Examples:
        ydcc hello.ydc               # Builds ./hello via hello.c
        ydcc hello.ydc -o prog       # Name the executable
        ydcc -S hello.ydc            # Only write hello.c
        ydcc -E hello.ydc            # Print the C translation
    """
    setup_logging(verbose)
    output, c_output = resolve_output_paths(input_file, output, c_output)
    logger.debug(f"cc={cc} cflags={list(cflags)} strict={strict}")

    try:
        transpiler = Transpiler(TranspilerOptions(strict=strict))

        if verbose and not print_c:
            click.echo(f"[1/2] Translating {input_file.name} → {c_output.name}")

        result = transpiler.transpile_file(input_file)

        for warning in result.warnings:
            click.echo(str(warning).replace("error:", "warning:", 1), err=True)

        if print_c:
            click.echo(result.c_source, nl=False)
            return

        if verbose:
            click.echo(f"      Tokenized: {result.token_count} tokens")
            click.echo(f"      Functions: {', '.join(result.function_names) or 'none'}")

        if translate_only:
            c_output.write_text(result.c_source, encoding="utf-8")
            click.echo(f"Translated {input_file} -> {c_output}")
            return

        if verbose:
            click.echo(f"[2/2] Compiling {c_output.name} → {output.name} with {cc}")

        build_executable(
            result.c_source,
            c_output,
            output,
            ToolchainOptions(cc=cc, cflags=list(cflags)),
        )

        click.echo(f"Built {output}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Build")


if __name__ == "__main__":
    main()
