"""CLI commands for placing orders."""

from __future__ import annotations

import math

import click

from cafe.application.build_drink import BASE_BEVERAGES, BuildDrinkHandler
from cafe.application.complete_order import CompleteOrderHandler
from cafe.application.dto import AddOnSpec, DrinkSpec
from cafe.application.place_order import PlaceOrderHandler
from cafe.application.show_menu import is_valid_size
from cafe.application.show_receipt import ShowReceiptHandler
from cafe.domain.exceptions import DomainException
from cafe.infrastructure.bootstrap import order_repository
from cafe.infrastructure.cli.display import display_receipt


def _parse_add_on(raw: str) -> AddOnSpec:
    """Parse 'sugar:honey:2' (or 'milk:oat', or 'shot') into an AddOnSpec."""
    parts = [p.strip() for p in raw.split(":")]
    if not parts[0] or len(parts) > 3:
        raise click.BadParameter(
            f"Invalid add-on format '{raw}'. Expected 'KIND[:VARIANT[:AMOUNT]]'."
        )
    kind = parts[0]
    variant = parts[1] if len(parts) > 1 and parts[1] else None
    amount = None
    if len(parts) == 3:
        try:
            amount = float(parts[2])
        except ValueError:
            raise click.BadParameter(
                f"Invalid amount '{parts[2]}' for add-on '{kind}'."
            )
        if not math.isfinite(amount):
            raise click.BadParameter(
                f"Invalid amount '{parts[2]}' for add-on '{kind}'."
            )
    return AddOnSpec(kind=kind, variant=variant, amount=amount)


def _validate_size(ctx, param, value: str) -> str:
    if not is_valid_size(value):
        raise click.BadParameter(
            f"Unknown size '{value}'. Expected small, medium, large or extra-large."
        )
    return value


@click.command("order")
@click.option("--customer", required=True, help="Customer name.")
@click.option(
    "--drink",
    required=True,
    type=click.Choice(list(BASE_BEVERAGES), case_sensitive=False),
    help="Base drink.",
)
@click.option(
    "--size",
    default="medium",
    show_default=True,
    callback=_validate_size,
    help="Cup size.",
)
@click.option(
    "--add",
    "add_ons",
    multiple=True,
    help="Add-on as 'KIND[:VARIANT[:AMOUNT]]', e.g. 'sugar:honey:2'. Repeatable; applied in order.",
)
@click.option(
    "--complete", is_flag=True, default=False, help="Mark the order ready straight away."
)
@click.pass_obj
def order_place(
    obj: dict,
    customer: str,
    drink: str,
    size: str,
    add_ons: tuple[str, ...],
    complete: bool,
) -> None:
    """Build a drink, place the order and print the receipt."""
    spec = DrinkSpec(base=drink, size=size, add_ons=[_parse_add_on(a) for a in add_ons])

    order_repo = order_repository()
    shop = obj["shop"]

    try:
        beverage = BuildDrinkHandler().handle(spec)
        dto = PlaceOrderHandler(order_repo, shop).handle(customer, beverage)
        if complete:
            CompleteOrderHandler(order_repo).handle(dto.number)
        receipt = ShowReceiptHandler(order_repo, shop).handle(dto.number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.number} placed for {dto.customer_name}")
    click.echo(f"Estimated preparation time: {dto.preparation_time} minutes")
    display_receipt(receipt)
