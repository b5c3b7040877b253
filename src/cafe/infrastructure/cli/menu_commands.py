"""CLI commands for browsing the menu and running the sample day."""

from __future__ import annotations

import click

from cafe.application.build_drink import BuildDrinkHandler
from cafe.application.complete_order import CompleteOrderHandler
from cafe.application.daily_stats import DailyStatsHandler
from cafe.application.dto import AddOnSpec, DrinkSpec
from cafe.application.place_order import PlaceOrderHandler
from cafe.application.show_menu import ShowMenuHandler
from cafe.application.show_receipt import ShowReceiptHandler
from cafe.domain.exceptions import DomainException
from cafe.infrastructure.bootstrap import order_repository
from cafe.infrastructure.cli.display import display_menu, display_receipt, display_stats

# (customer, drink spec) pairs placed by ``cafe demo``
SAMPLE_ORDERS: list[tuple[str, DrinkSpec]] = [
    ("Alice Johnson", DrinkSpec("coffee", "large")),
    ("Bob Smith", DrinkSpec("coffee", "medium", [
        AddOnSpec("milk", "almond"),
        AddOnSpec("sugar", "honey", 2),
        AddOnSpec("flavor", "vanilla", 1.5),
    ])),
    ("Carol Davis", DrinkSpec("espresso", "small", [
        AddOnSpec("shot", "ristretto", 2),
        AddOnSpec("milk", "oat"),
        AddOnSpec("flavor", "hazelnut"),
        AddOnSpec("cream", "light", 0.5),
    ])),
    ("David Wilson", DrinkSpec("cappuccino", "large", [
        AddOnSpec("syrup", "caramel", 3),
        AddOnSpec("flavor", "cinnamon", 0.5),
        AddOnSpec("cream", "regular", 1.5),
        AddOnSpec("sugar", "brown", 1),
    ])),
    ("Eva Martinez", DrinkSpec("coffee", "medium", [
        AddOnSpec("milk", "skim"),
        AddOnSpec("sugar", "stevia", 2),
        AddOnSpec("flavor", "vanilla", 0.5),
    ])),
    ("Frank Thompson", DrinkSpec("cappuccino", "extra large", [
        AddOnSpec("shot", "espresso", 3),
        AddOnSpec("milk", "coconut"),
        AddOnSpec("syrup", "vanilla", 2),
        AddOnSpec("syrup", "caramel", 1),
        AddOnSpec("flavor", "chocolate", 1.5),
        AddOnSpec("cream", "coconut", 2.0),
        AddOnSpec("sugar", "raw", 1),
    ])),
]


@click.command("menu")
@click.pass_obj
def menu_show(obj: dict) -> None:
    """Show the menu with base drinks and every add-on."""
    display_menu(ShowMenuHandler(obj["shop"].name).handle())


@click.command("demo")
@click.pass_obj
def demo_run(obj: dict) -> None:
    """Place a day's worth of sample orders and print the statistics."""
    shop = obj["shop"]
    order_repo = order_repository()
    builder = BuildDrinkHandler()
    place = PlaceOrderHandler(order_repo, shop)
    complete = CompleteOrderHandler(order_repo)
    receipt = ShowReceiptHandler(order_repo, shop)

    try:
        for customer, spec in SAMPLE_ORDERS:
            dto = place.handle(customer, builder.handle(spec))
            click.echo(f"Order #{dto.number} placed for {dto.customer_name}")
            display_receipt(receipt.handle(dto.number))
            complete.handle(dto.number)
            click.echo(f"Order #{dto.number} completed for {dto.customer_name}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_stats(shop.name, DailyStatsHandler(order_repo).handle())
