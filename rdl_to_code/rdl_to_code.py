import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGenerationError, CodeGeneratorConfig, OutputMode, PipelineGenerator

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON generator configuration file")
@click.option("--namespace", "-n", default=None, type=str, help="Java package of the generated units (default: schema namespace)")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing units")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every emitted type")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(file_okay=False, resolve_path=True))
def rdl_to_code(config, namespace, force, verbose, path, output):
    """Generate Java models for the RDL JSON schema at PATH into the OUTPUT directory."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if namespace:
        config.namespace = namespace
    if force:
        config.output.mode = OutputMode.FORCE
    config.banner = reconstruct_command_line(rdl_to_code)
    logger.debug(f"Configuration: {config.to_dict()}")

    try:
        written = PipelineGenerator(schema, config).write(output)
    except (CodeGenerationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(written)} file(s) in {output}")
