# pos_cli/orders/commands.py
from datetime import date
from typing import List
import uuid

import typer

from pos_cli.core.api import (
    ApiError,
    api_create_order,
    api_get_order,
    api_list_orders,
    api_update_order_item,
    api_delete_order_item,
)
from pos_cli.core.utils import require_session, print_rows

app = typer.Typer(help="Order commands.")

ORDER_COLUMNS = [
    ("id", "ID", 36),
    ("product_name", "Product", 24),
    ("product_price", "Price", 10),
    ("amount", "Qty", 5),
    ("status", "Status", 12),
]


def parse_item(raw: str) -> dict:
    """
    Parses "name:price:amount" into an order line.
    """
    parts = raw.rsplit(":", 2)
    if len(parts) != 3:
        raise typer.BadParameter(f"'{raw}' is not in the form name:price:amount")

    name, price, amount = parts
    try:
        price_value = float(price)
        amount_value = int(amount)
    except ValueError:
        raise typer.BadParameter(f"'{raw}' has a non-numeric price or amount")

    if not name or price_value < 0 or amount_value <= 0:
        raise typer.BadParameter(f"'{raw}' needs a name, a price >= 0 and an amount > 0")
    return {"product_name": name, "product_price": price_value, "amount": amount_value}


@app.command("create")
def create_order(
    shop_name: str = typer.Argument(..., help="Shop to order from"),
    items: List[str] = typer.Option(..., "--item", "-i", help="Order line as name:price:amount (repeatable)"),
    status: str = typer.Option("pending", "--status", "-s", help="Initial status of every line"),
):
    """
    Place an order at a shop. No login required.
    """
    order_day = date.today().isoformat()
    lines = []
    for raw in items:
        line = parse_item(raw)
        line.update({"shop_name": shop_name, "order_day": order_day, "status": status})
        lines.append(line)

    order = {"order_id": str(uuid.uuid4()), "orders": lines}
    try:
        created = api_create_order(shop_name, order)
    except ApiError as e:
        typer.echo(f"Failed to create order: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Order {order['order_id']} placed with {len(created)} item(s).")


@app.command("get")
def get_order(
    shop_name: str = typer.Argument(..., help="Shop name"),
    order_id: str = typer.Argument(..., help="Order ID"),
):
    """
    Show every line of an order.
    """
    try:
        lines = api_get_order(shop_name, order_id)
    except ApiError as e:
        typer.echo(f"Failed to get order: {e}")
        raise typer.Exit(code=1)

    if not lines:
        typer.echo(f"No order {order_id} at '{shop_name}'.")
        return
    print_rows(lines, ORDER_COLUMNS)


@app.command("list")
def list_orders(
    day: str = typer.Option(None, "--day", "-d", help="Day as YYYY-MM-DD (default: today)"),
):
    """
    List the orders your shop received on a day.
    """
    session = require_session()
    try:
        lines = api_list_orders(session["access_token"], session["username"], order_day=day)
    except ApiError as e:
        typer.echo(f"Failed to get orders: {e}")
        raise typer.Exit(code=1)

    if not lines:
        typer.echo("No orders found.")
        return
    print_rows(lines, ORDER_COLUMNS)


@app.command("update")
def update_order_item(
    order_item_id: str = typer.Argument(..., help="Order line ID"),
    amount: int = typer.Argument(..., min=1, help="New amount"),
    status: str = typer.Argument(..., help="New status"),
):
    """
    Change the amount or status of an order line of your shop.
    """
    session = require_session()
    try:
        updated = api_update_order_item(session["access_token"], session["username"], order_item_id, amount, status)
    except ApiError as e:
        typer.echo(f"Failed to update order item: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Order item {updated['id']} is now {updated['amount']} x {updated['product_name']} ({updated['status']}).")


@app.command("delete")
def delete_order_item(
    order_item_id: str = typer.Argument(..., help="Order line ID to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Delete an order line of your shop.
    """
    session = require_session()

    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete order item {order_item_id}?")
        if not confirm:
            typer.echo("Operation cancelled.")
            raise typer.Exit(code=0)

    try:
        api_delete_order_item(session["access_token"], session["username"], order_item_id)
    except ApiError as e:
        typer.echo(f"Failed to delete order item: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Order item {order_item_id} deleted.")
