"""Console formatting shared by the CLI commands."""

from __future__ import annotations

import click

from cafe.application.dto import DailyStatsDTO, MenuDTO, ReceiptDTO

RECEIPT_WIDTH = 45
MENU_WIDTH = 55
STATS_WIDTH = 40


def display_receipt(receipt: ReceiptDTO) -> None:
    rule = "=" * RECEIPT_WIDTH
    click.echo()
    click.echo(rule)
    click.echo(receipt.shop_name.upper().center(RECEIPT_WIDTH).rstrip())
    click.echo(rule)
    click.echo(f"Order #: {receipt.order_number}")
    click.echo(f"Customer: {receipt.customer_name}")
    click.echo(f"Date: {receipt.placed_at}")
    click.echo("-" * RECEIPT_WIDTH)
    click.echo(f"Item: {receipt.item}")
    click.echo(f"Size: {receipt.size}")
    click.echo()
    click.echo("Ingredients:")
    for ingredient in receipt.ingredients:
        click.echo(f"  • {ingredient}")
    click.echo()
    click.echo("-" * RECEIPT_WIDTH)
    click.echo(f"Subtotal: {receipt.subtotal}")
    click.echo(f"Tax ({receipt.tax_rate_percent}%): {receipt.tax}")
    click.echo(f"TOTAL: {receipt.total}")
    click.echo()
    click.echo("Nutritional Information:")
    click.echo(f"Calories: {receipt.calories}")
    click.echo(f"Preparation time: {receipt.preparation_time} minutes")
    click.echo(f"Status: {receipt.status}")
    click.echo()
    click.echo(f"Thank you for visiting {receipt.shop_name}!")
    click.echo(rule)


def display_menu(menu: MenuDTO) -> None:
    rule = "=" * MENU_WIDTH
    click.echo(rule)
    click.echo(f"{menu.shop_name.upper()} MENU".center(MENU_WIDTH).rstrip())
    click.echo(rule)
    for section in menu.sections:
        click.echo()
        click.echo(f"{section.title.upper()}:")
        for option in section.options:
            if not option.price:
                click.echo(f"  • {option.name}")
            elif option.unit == "starting at":
                click.echo(f"  • {option.name} - Starting at {option.price}")
            elif option.unit:
                click.echo(f"  • {option.name} - {option.price} {option.unit}")
            else:
                click.echo(f"  • {option.name} - {option.price}")
    click.echo()
    click.echo(rule)


def display_stats(shop_name: str, stats: DailyStatsDTO) -> None:
    click.echo()
    click.echo(f"Daily Statistics for {shop_name}")
    click.echo("=" * STATS_WIDTH)
    click.echo(f"Total orders: {stats.total_orders}")
    click.echo(f"Completed orders: {stats.completed_orders}")
    click.echo(f"Pending orders: {stats.pending_orders}")
    click.echo(f"Total revenue: {stats.total_revenue}")
    if stats.average_order_value is not None:
        click.echo(f"Average order value: {stats.average_order_value}")
    click.echo(f"Most popular size: {stats.most_popular_size}")
    click.echo("=" * STATS_WIDTH)
