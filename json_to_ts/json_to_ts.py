import json
from pathlib import Path

import click
from click.core import ParameterSource

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import ConverterConfig
from .converter import DEFAULT_ROOT_NAME, convert_text
from .errors import JsonToTsError
from .samples import SAMPLE_JSON
from .utils import snake_to_pascal_case

FLAG_OPTIONS = ("detect_enums", "camel_case", "mark_optional", "strict_null_checks")


def _default_root_name(path: str, sample: bool) -> str:
    if sample or path == "-":
        return DEFAULT_ROOT_NAME
    return snake_to_pascal_case(Path(path).stem) or DEFAULT_ROOT_NAME


def _load_config(config_path: str | None, flags: dict) -> ConverterConfig:
    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            try:
                config = ConverterConfig.from_dict(json.load(f))
            except (json.JSONDecodeError, UnicodeDecodeError, AttributeError, TypeError) as e:
                raise click.BadParameter(f"invalid options file: {e}", param_hint="'--config'") from e
    else:
        config = ConverterConfig()

    # Flags given on the command line override the config file
    ctx = click.get_current_context()
    for name in FLAG_OPTIONS:
        if ctx.get_parameter_source(name) != ParameterSource.DEFAULT:
            setattr(config, name, flags[name])
    return config


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root interface name (default: file name in PascalCase)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--detect-enums/--no-detect-enums", default=False, help="Turn arrays of strings into enums")
@click.option("--camel-case/--no-camel-case", default=False, help="Rewrite snake_case property names to camelCase")
@click.option("--mark-optional/--no-mark-optional", default=False, help="Mark every property as optional")
@click.option(
    "--strict-null-checks/--no-strict-null-checks",
    default=True,
    help="Type null values as null instead of any",
)
@click.option("--sample", is_flag=True, default=False, help="Convert the built-in sample document")
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Start the output with a comment naming the command that produced it",
)
@click.argument("path", default="-", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("output", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
def json_to_ts(
    name,
    config,
    detect_enums,
    camel_case,
    mark_optional,
    strict_null_checks,
    sample,
    add_generation_comment,
    path,
    output,
):
    flags = {
        "detect_enums": detect_enums,
        "camel_case": camel_case,
        "mark_optional": mark_optional,
        "strict_null_checks": strict_null_checks,
    }
    converter_config = _load_config(config, flags)

    if sample:
        text = SAMPLE_JSON
    else:
        # Bytes: convert_text reports undecodable input as invalid JSON
        with click.open_file(path, "rb") as f:
            text = f.read()

    if name is None:
        name = _default_root_name(path, sample)

    try:
        out = convert_text(text, name, converter_config)
    except JsonToTsError as e:
        raise click.ClickException(str(e)) from e

    if add_generation_comment:
        command_line = reconstruct_command_line(click.get_current_context().command)
        header = f"// Generated by json_to_ts {__version__}\n// {command_line}\n"
        out = f"{header}\n{out}" if out else header.rstrip()

    if output is None:
        click.echo(out)
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
