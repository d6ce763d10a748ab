"""
CLI utilities for command line reconstruction.

The reconstructed command line is recorded in the header of every
generated unit, so a reader can tell how to regenerate it.
"""

from pathlib import Path

import click

PROGRAM_NAME = "rdl_to_code"


def _display_value(value) -> str:
    """Show existing paths by file name only, everything else as is."""
    if isinstance(value, (str, Path)):
        path = Path(str(value))
        return path.name if path.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the command line of the current Click invocation.

    Args:
        click_command: Click command object for introspection

    Returns:
        ``rdl_to_code`` followed by the positional arguments, then the
        options that differ from their defaults
    """
    try:
        cli_args = click.get_current_context().params
    except RuntimeError:
        # Called outside of a click invocation
        return PROGRAM_NAME

    arguments: list[str] = []
    options: list[str] = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if not value:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _display_value(value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
