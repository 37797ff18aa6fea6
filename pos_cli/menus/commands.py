# pos_cli/menus/commands.py
import typer

from pos_cli.core.api import ApiError, api_get_menu, api_add_menu_item, api_update_menu_item, api_delete_menu_item
from pos_cli.core.utils import require_session, print_rows

app = typer.Typer(help="Shop menu commands.")

CATALOGS = ("breakfast", "lunch", "dinner")

MENU_COLUMNS = [
    ("id", "ID", 36),
    ("catalog", "Catalog", 10),
    ("product_name", "Product", 24),
    ("product_price", "Price", 10),
    ("description", "Description", 30),
]


def _check_catalog(catalog: str) -> str:
    catalog = catalog.lower()
    if catalog not in CATALOGS:
        typer.echo(f"Invalid catalog '{catalog}'. Use one of: {', '.join(CATALOGS)}.")
        raise typer.Exit(code=1)
    return catalog


@app.command("show")
def show_menu(shop_name: str = typer.Argument(..., help="Shop name")):
    """
    Show the public menu of a shop.
    """
    try:
        items = api_get_menu(shop_name)
    except ApiError as e:
        typer.echo(f"Failed to get menu: {e}")
        raise typer.Exit(code=1)

    if not items:
        typer.echo(f"Shop '{shop_name}' has no menu items.")
        return
    print_rows(items, MENU_COLUMNS)


@app.command("add")
def add_menu_item(
    product_id: str = typer.Argument(..., help="ID of the product being offered"),
    product_name: str = typer.Argument(..., help="Name shown on the menu"),
    price: float = typer.Argument(..., min=0, help="Menu price"),
    catalog: str = typer.Option("lunch", "--catalog", "-c", help="breakfast, lunch or dinner"),
    description: str = typer.Option("", "--description", "-d", help="Menu description"),
):
    """
    Put one of your products on your shop's menu.
    """
    session = require_session()
    item = {
        "user_id": session["user_id"],
        "shop_name": session["username"],
        "product_id": product_id,
        "product_name": product_name,
        "product_price": price,
        "catalog": _check_catalog(catalog),
        "description": description,
    }
    try:
        created = api_add_menu_item(session["access_token"], session["username"], item)
    except ApiError as e:
        typer.echo(f"Failed to add menu item: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Menu item '{created['product_name']}' added with id {created['id']}.")


@app.command("update")
def update_menu_item(
    menu_item_id: str = typer.Argument(..., help="Menu item ID"),
    product_name: str = typer.Argument(..., help="Name shown on the menu"),
    price: float = typer.Argument(..., min=0, help="Menu price"),
    catalog: str = typer.Option("lunch", "--catalog", "-c", help="breakfast, lunch or dinner"),
    description: str = typer.Option("", "--description", "-d", help="Menu description"),
):
    """
    Update an item of your shop's menu.
    """
    session = require_session()
    item = {
        "user_id": session["user_id"],
        "shop_name": session["username"],
        "product_name": product_name,
        "product_price": price,
        "catalog": _check_catalog(catalog),
        "description": description,
    }
    try:
        updated = api_update_menu_item(session["access_token"], session["username"], menu_item_id, item)
    except ApiError as e:
        typer.echo(f"Failed to update menu item: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Menu item {updated['id']} updated.")


@app.command("delete")
def delete_menu_item(
    menu_item_id: str = typer.Argument(..., help="Menu item ID to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Remove an item from your shop's menu.
    """
    session = require_session()

    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete menu item {menu_item_id}?")
        if not confirm:
            typer.echo("Operation cancelled.")
            raise typer.Exit(code=0)

    try:
        api_delete_menu_item(session["access_token"], session["username"], menu_item_id, session["user_id"])
    except ApiError as e:
        typer.echo(f"Failed to delete menu item: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Menu item {menu_item_id} deleted.")
