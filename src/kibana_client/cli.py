"""
kibana-client command line tool.

Connection settings come from options or the KIBANA_* environment
variables; entities are printed as indented JSON.
"""

from functools import wraps
from typing import Optional
import logging

import click
import pydantic
import yaml

from kibana_client.client import KibanaClient
from kibana_client.exceptions import ConfigurationError, DecodeError, ErrorResponse, NetworkError
from kibana_client.models.roles import CreateOrUpdateRoleOptions
from kibana_client.models.spaces import (
    CreateSpaceOptions,
    GetAllSpacesOptions,
    UpdateSpaceOptions,
)
from kibana_client.options import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, with_base_url, with_timeout


def handle_api_exceptions(func):
    """Print API and network errors and exit with status 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ErrorResponse as e:
            click.echo(f"[{click.style(str(e.status_code), fg='red')}] {e.message}", err=True)
        except NetworkError as e:
            ctx = click.get_current_context()
            url = ctx.find_root().params.get("url")
            click.echo(
                f"Connection to [{click.style(str(url), fg='red')}] could not be established: {e.message}",
                err=True,
            )
        except DecodeError as e:
            click.echo(f"Unexpected response: {e.message}", err=True)
        raise click.exceptions.Exit(1)

    return wrapper


def echo_entity(entity) -> None:
    click.echo(entity.model_dump_json(indent=4, by_alias=True))


def get_client(ctx: click.Context) -> KibanaClient:
    """Create the client on first use and close it with the context."""
    obj = ctx.ensure_object(dict)
    if "client" in obj:
        return obj["client"]

    params = ctx.find_root().params
    options = [with_base_url(params["url"]), with_timeout(params["timeout"])]
    try:
        if params["api_key"]:
            client = KibanaClient.from_api_key(params["api_key"], *options)
        elif params["username"]:
            client = KibanaClient.from_basic_auth(params["username"], params["password"] or "", *options)
        else:
            raise click.UsageError("Provide --api-key or --username/--password (or KIBANA_* variables).")
    except ConfigurationError as e:
        raise click.UsageError(e.message)

    obj["client"] = client
    ctx.find_root().call_on_close(client.close)
    return client


@click.group()
@click.option("--url", envvar="KIBANA_URL", default=DEFAULT_BASE_URL, show_default=True, help="Kibana base URL")
@click.option("--username", "-u", envvar="KIBANA_USERNAME", help="Basic auth username")
@click.option("--password", "-p", envvar="KIBANA_PASSWORD", help="Basic auth password")
@click.option("--api-key", envvar="KIBANA_API_KEY", help="API key (takes precedence over basic auth)")
@click.option("--timeout", envvar="KIBANA_TIMEOUT", type=float, default=DEFAULT_TIMEOUT, show_default=True)
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
@click.pass_context
def cli(ctx, url, username, password, api_key, timeout, verbose):
    """Manage Kibana spaces and roles."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# =============================================================================
# Spaces
# =============================================================================


@cli.group()
def spaces():
    """Manage spaces."""


@spaces.command("list")
@click.option("--purpose", help="any, copySavedObjectsIntoSpace or shareSavedObjectsIntoSpace")
@click.option("--include-authorized-purpose", is_flag=True)
@click.pass_context
@handle_api_exceptions
def list_spaces(ctx, purpose, include_authorized_purpose):
    opt = GetAllSpacesOptions(purpose=purpose, include_authorized_purpose=include_authorized_purpose or None)
    items, _ = get_client(ctx).spaces.list(opt)
    for space in items:
        echo_entity(space)


@spaces.command("get")
@click.argument("space_id")
@click.pass_context
@handle_api_exceptions
def get_space(ctx, space_id):
    space, _ = get_client(ctx).spaces.get(space_id)
    echo_entity(space)


def space_fields(func):
    func = click.option("--image-url")(func)
    func = click.option("--disabled-feature", "disabled_features", multiple=True)(func)
    func = click.option("--initials")(func)
    func = click.option("--color")(func)
    func = click.option("--description")(func)
    return func


def _space_values(**fields) -> dict:
    values = {key: value for key, value in fields.items() if value is not None}
    if not values.get("disabled_features"):
        values.pop("disabled_features", None)
    return values


@spaces.command("create")
@click.option("--id", "space_id", required=True)
@click.option("--name", required=True)
@space_fields
@click.pass_context
@handle_api_exceptions
def create_space(ctx, space_id, name, **fields):
    opt = CreateSpaceOptions(id=space_id, name=name, **_space_values(**fields))
    space, _ = get_client(ctx).spaces.create(opt)
    echo_entity(space)


@spaces.command("update")
@click.argument("space_id")
@click.option("--name")
@space_fields
@click.pass_context
@handle_api_exceptions
def update_space(ctx, space_id, name, **fields):
    opt = UpdateSpaceOptions(**_space_values(name=name, **fields))
    space, _ = get_client(ctx).spaces.update(space_id, opt)
    echo_entity(space)


@spaces.command("delete")
@click.argument("space_id")
@click.pass_context
@handle_api_exceptions
def delete_space(ctx, space_id):
    response = get_client(ctx).spaces.delete(space_id)
    click.echo(f"Deleted space {space_id} ({response.status_code})")


# =============================================================================
# Roles
# =============================================================================


@cli.group()
def roles():
    """Manage roles."""


@roles.command("list")
@click.pass_context
@handle_api_exceptions
def list_roles(ctx):
    items, _ = get_client(ctx).roles.list()
    for role in items:
        echo_entity(role)


@roles.command("get")
@click.argument("name")
@click.pass_context
@handle_api_exceptions
def get_role(ctx, name):
    role, _ = get_client(ctx).roles.get(name)
    echo_entity(role)


@roles.command("put")
@click.argument("name")
@click.option(
    "--file",
    "-f",
    "definition",
    type=click.File("r"),
    required=True,
    help="Role definition as YAML or JSON",
)
@click.pass_context
@handle_api_exceptions
def put_role(ctx, name, definition):
    data: Optional[dict] = yaml.safe_load(definition)
    if not isinstance(data, dict):
        raise click.BadParameter("role definition must be a mapping", param_hint="--file")
    try:
        opt = CreateOrUpdateRoleOptions.model_validate(data)
    except pydantic.ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--file")
    role, response = get_client(ctx).roles.create_or_update(name, opt)
    if role is not None:
        echo_entity(role)
    else:
        click.echo(f"Saved role {name} ({response.status_code})")


@roles.command("delete")
@click.argument("name")
@click.pass_context
@handle_api_exceptions
def delete_role(ctx, name):
    response = get_client(ctx).roles.delete(name)
    click.echo(f"Deleted role {name} ({response.status_code})")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
