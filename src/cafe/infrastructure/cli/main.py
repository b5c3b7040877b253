from decimal import Decimal

import click

from cafe.domain.exceptions import DomainException
from cafe.infrastructure.bootstrap import SHOP_NAME, TAX_RATE, coffee_shop
from cafe.infrastructure.cli.menu_commands import demo_run, menu_show
from cafe.infrastructure.cli.order_commands import order_place
from cafe.infrastructure.logs import setup_logging


@click.group()
@click.option(
    "--shop-name",
    envvar="CAFE_SHOP_NAME",
    default=SHOP_NAME,
    show_default=True,
    help="Shop name printed on receipts.",
)
@click.option(
    "--tax-rate",
    envvar="CAFE_TAX_RATE",
    default=str(TAX_RATE),
    show_default=True,
    help="Flat tax rate, e.g. 0.08.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, shop_name: str, tax_rate: str, verbose: bool) -> None:
    """Café — build drinks, place orders, print receipts"""
    setup_logging(verbose)
    try:
        shop = coffee_shop(name=shop_name, tax_rate=Decimal(tax_rate))
    except ArithmeticError:
        raise click.BadParameter(f"Invalid tax rate '{tax_rate}'.", param_hint="--tax-rate")
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.obj = {"shop": shop}


# Register subcommands
cli.add_command(demo_run)
cli.add_command(menu_show)
cli.add_command(order_place)
