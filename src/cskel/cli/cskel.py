"""
cskel - Skeleton Translator Command-Line Interface
==================================================

This module implements the command-line interface for the cskel
translator. It is the only collaborator of the translation pipeline: it
validates the target selector, reads the source, runs the pipeline, and
reports failures.

Usage Examples
--------------
Translate to Java (writes hello.java):
    $ cskel hello.c

Translate to Python on stdout:
    $ cskel hello.c -t python -o -

Choose the default target through the environment:
    $ CSKEL_TARGET=python cskel hello.c

Verbose mode:
    $ cskel -v hello.c
"""

from pathlib import Path
from typing import Optional

import click

from cskel import __version__
from cskel.compiler import SkeletonCompiler, CompilerOptions
from cskel.targets import Target
from cskel.cli.errors import handle_cli_exception


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
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    help="Output file, or '-' for stdout (default: input with .java/.py suffix)",
)
@click.option(
    "-t", "--target",
    type=click.Choice(Target.names(), case_sensitive=False),
    default=None,
    help="Output language. Default: $CSKEL_TARGET, else java.",
)
@click.option(
    "-c", "--comments",
    is_flag=True,
    help="Put a 'generated by' comment on the first line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cskel")
def main(
    input_file: Path,
    output: Optional[Path],
    target: Optional[str],
    comments: bool,
    verbose: bool,
) -> None:
    """
    Translate C declarations into a Java or Python skeleton.

    INPUT_FILE is the C source file (.c) to translate.

    \b
    Examples:
        cskel hello.c                  # Outputs hello.java
        cskel hello.c -t python        # Outputs hello.py
        cskel hello.c -o -             # Print to stdout
        cskel -v hello.c               # Verbose output

    \b
    Recognized C constructs:
        - #include <name>
        - int/float/double/char/void variables
        - function signatures with typed parameters
    Function bodies become placeholders.
    """
    try:
        options = CompilerOptions.from_env()
        if target is not None:
            options.target = Target.from_name(target)
        options.output_comments = comments

        if output is None:
            output = input_file.with_suffix(options.target.file_suffix)
        to_stdout = str(output) == "-"

        if verbose:
            click.echo(f"Translating {input_file}...", err=to_stdout)
            click.echo(f"Target: {options.target.value}", err=to_stdout)

        compiler = SkeletonCompiler(options)
        result = compiler.compile_file(input_file)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens", err=to_stdout)
            click.echo(f"Parsed: {result.declaration_count} declarations", err=to_stdout)
            names = ", ".join(f.name for f in result.program.functions())
            if names:
                click.echo(f"Functions: {names}", err=to_stdout)

        if to_stdout:
            click.echo(result.output, nl=False)
            return

        output.write_text(result.output, encoding="utf-8")
        click.echo(f"Translated {input_file} -> {output}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
