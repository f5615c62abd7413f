import json
import os

import click

from .configuration import AppConfig
from .entities import KeyLoadError, SigningEngineError
from .signing import SigningEngine
from .utils.logging_utils import get_logger, init_logger

logger = get_logger()


@click.group()
def cli():
    pass


configuration_file_option = click.option(
    "--configuration-file",
    "configuration_file_path",
    type=click.Path(dir_okay=False),
    default="wechatpay.yml",
    help="Path to the signer configuration file.",
    show_default=True,
)


def _load_configuration(configuration_file_path: str) -> AppConfig:
    if not os.path.exists(configuration_file_path):
        raise click.ClickException(f"Configuration file `{configuration_file_path}` does not exist, run `init-config` first.")

    configuration = AppConfig.from_file(configuration_file_path)
    init_logger(configuration.logging)

    return configuration


@cli.command("init-config")
@configuration_file_option
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file.")
def init_config(
    configuration_file_path: str,
    force: bool,
):
    if os.path.exists(configuration_file_path) and not force:
        raise click.ClickException(f"Configuration file `{configuration_file_path}` already exists, use --force to overwrite it.")

    os.makedirs(os.path.dirname(configuration_file_path) or ".", exist_ok=True)

    from .configuration import example_configuration_text
    with open(configuration_file_path, "w") as fd:
        fd.write(example_configuration_text)

    click.echo(f"Configuration written to: {configuration_file_path}")


@cli.command("check-key")
@configuration_file_option
def check_key(
    configuration_file_path: str,
):
    configuration = _load_configuration(configuration_file_path)

    try:
        store = configuration.create_key_material_store()
    except KeyLoadError as error:
        raise click.ClickException(error.reason)

    click.echo(f"{configuration.key.type} key loaded: {store.key_material!r}")


@cli.command()
@click.argument("method")
@click.argument("url_path")
@click.option("--body", type=str, default="", help="Request body, leave empty for GET.")
@click.option("--body-file", "body_file_path", type=click.Path(exists=True, dir_okay=False), help="Read the request body from a file.")
@configuration_file_option
def sign(
    method: str,
    url_path: str,
    body: str,
    body_file_path: str | None,
    configuration_file_path: str,
):
    if body and body_file_path:
        raise click.UsageError("--body and --body-file are mutually exclusive.")

    if not url_path.startswith("/"):
        raise click.BadParameter("must start with '/'", param_hint="URL_PATH")

    if body_file_path:
        with open(body_file_path, "rb") as fd:
            body = fd.read()

    configuration = _load_configuration(configuration_file_path)

    try:
        engine = SigningEngine(configuration.create_key_material_store())
        result = engine.sign(method, url_path, body, configuration.merchant.id, configuration.merchant.serial_no)
    except SigningEngineError as error:
        raise click.ClickException(str(error))

    click.echo(json.dumps({
        "authorization": result.header_value,
        "timestamp": result.timestamp,
        "nonce": result.nonce,
    }, indent=4))


if __name__ == "__main__":
    cli()
