"""Command-line access to the ARM client.

Credentials default to the ``AZURE_*`` environment variables (or ``.env``)::

    az-arm locations
    az-arm vm list
    az-arm vm start web-1 -g prod
    az-arm group delete scratch
"""

import json
import logging
from typing import Any

import click

from az_arm import __version__
from az_arm.client import ArmClient
from az_arm.errors import ArmError
from az_arm.settings import ArmSettings


def _setup_logging(level: int = logging.WARNING) -> None:
    """Configure the root ``az_arm`` logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s - %(message)s"))
    app_logger = logging.getLogger("az_arm")
    app_logger.handlers = [handler]
    app_logger.setLevel(level)
    app_logger.propagate = False

    # Silence noisy third-party loggers
    logging.getLogger("azure").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def _client(ctx: click.Context) -> ArmClient:
    """Build (once per invocation) the client for the current command."""
    obj = ctx.ensure_object(dict)
    if "client" not in obj:
        try:
            obj["client"] = ArmClient.from_settings(obj["settings"])
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc
        except ArmError as exc:
            raise click.ClickException(str(exc)) from exc
        ctx.call_on_close(obj["client"].close)
    return obj["client"]


def _run(ctx: click.Context, operation: Any, *args: Any) -> Any:
    try:
        return operation(_client(ctx), *args)
    except ArmError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(version=__version__, prog_name="az-arm")
@click.option("--tenant", envvar="AZURE_TENANT_ID", default=None, help="Tenant (directory) ID.")
@click.option(
    "--subscription", envvar="AZURE_SUBSCRIPTION_ID", default=None, help="Subscription ID."
)
@click.option(
    "--client-id", envvar="AZURE_CLIENT_ID", default=None, help="Application (client) ID."
)
@click.option(
    "--client-secret", envvar="AZURE_CLIENT_SECRET", default=None, help="Application secret."
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    tenant: str | None,
    subscription: str | None,
    client_id: str | None,
    client_secret: str | None,
    verbose: bool,
) -> None:
    """Azure Resource Manager client."""
    _setup_logging(level=logging.DEBUG if verbose else logging.WARNING)
    overrides = {
        "tenant_id": tenant,
        "subscription_id": subscription,
        "client_id": client_id,
        "client_secret": client_secret,
    }
    ctx.ensure_object(dict)
    ctx.obj["settings"] = ArmSettings(**{k: v for k, v in overrides.items() if v})


@cli.command()
@click.pass_context
def locations(ctx: click.Context) -> None:
    """List the locations available to the subscription."""
    _echo_json(_run(ctx, lambda arm: arm.list_locations()))


@cli.command()
@click.option("--tag", "tag_name", default=None, help="Only resources carrying this tag.")
@click.option("--value", "tag_value", default=None, help="Required value of --tag.")
@click.pass_context
def resources(ctx: click.Context, tag_name: str | None, tag_value: str | None) -> None:
    """List resources, optionally filtered by tag."""
    if tag_value is not None and tag_name is None:
        raise click.UsageError("--value requires --tag.")
    if tag_name:
        _echo_json(_run(ctx, lambda arm: arm.resources.list_by_tag(tag_name, tag_value)))
    else:
        _echo_json(_run(ctx, lambda arm: arm.resources.list_all()))


# ---------------------------------------------------------------------------
# vm
# ---------------------------------------------------------------------------


@cli.group()
def vm() -> None:
    """Virtual machine operations."""


_group_option = click.option(
    "--resource-group", "-g", default="Default", show_default=True, help="Resource group."
)


@vm.command("list")
@click.pass_context
def vm_list(ctx: click.Context) -> None:
    """List every VM in the subscription."""
    _echo_json(_run(ctx, lambda arm: arm.vms.list_all()))


@vm.command("show")
@click.argument("name")
@_group_option
@click.pass_context
def vm_show(ctx: click.Context, name: str, resource_group: str) -> None:
    """Show a VM's definition."""
    _echo_json(_run(ctx, lambda arm: arm.vms.get(name, resource_group)))


@vm.command("status")
@click.argument("name")
@_group_option
@click.pass_context
def vm_status(ctx: click.Context, name: str, resource_group: str) -> None:
    """Print a VM's power state."""
    click.echo(_run(ctx, lambda arm: arm.vms.get_status(name, resource_group)))


def _vm_action(action: str, help_text: str) -> None:
    @vm.command(action, help=help_text)
    @click.argument("name")
    @_group_option
    @click.pass_context
    def _command(ctx: click.Context, name: str, resource_group: str) -> None:
        result = _run(ctx, lambda arm: getattr(arm.vms, action)(name, resource_group))
        if isinstance(result, str):
            click.echo(result)
        else:
            _echo_json(result)


_vm_action("start", "Start a VM.")
_vm_action("stop", "Power off a VM (compute stays allocated).")
_vm_action("restart", "Restart a VM.")
_vm_action("deallocate", "Stop a VM and release its compute resources.")


# ---------------------------------------------------------------------------
# group
# ---------------------------------------------------------------------------


@cli.group()
def group() -> None:
    """Resource group operations."""


@group.command("list")
@click.pass_context
def group_list(ctx: click.Context) -> None:
    """List resource groups."""
    _echo_json(_run(ctx, lambda arm: arm.resource_groups.list_all()))


@group.command("create")
@click.argument("name")
@click.option("--location", "-l", required=True, help="Location, e.g. westeurope.")
@click.pass_context
def group_create(ctx: click.Context, name: str, location: str) -> None:
    """Create (or update) a resource group."""
    _echo_json(_run(ctx, lambda arm: arm.resource_groups.create(name, location)))


@group.command("delete")
@click.argument("name")
@click.confirmation_option(prompt="Delete the group and every resource in it?")
@click.pass_context
def group_delete(ctx: click.Context, name: str) -> None:
    """Delete a resource group and its contents."""
    status = _run(ctx, lambda arm: arm.resource_groups.delete(name))
    click.echo(f"Deleted {name} ({status})")
