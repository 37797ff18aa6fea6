# pos_cli/products/commands.py
import typer

from pos_cli.core.api import ApiError, api_list_products, api_create_product, api_update_product, api_delete_product
from pos_cli.core.utils import require_session, print_rows

app = typer.Typer(help="Product catalog commands.")

PRODUCT_COLUMNS = [("id", "ID", 36), ("name", "Name", 24), ("price", "Price", 10), ("description", "Description", 30)]


@app.command("list")
def list_products(
    name: str = typer.Option(None, "--name", "-n", help="Only products with this exact name"),
):
    """
    List your products.
    """
    session = require_session()
    try:
        products = api_list_products(session["access_token"], session["username"], name=name)
    except ApiError as e:
        typer.echo(f"Failed to get products: {e}")
        raise typer.Exit(code=1)

    if not products:
        typer.echo("No products found.")
        return
    print_rows(products, PRODUCT_COLUMNS)


@app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name"),
    price: float = typer.Argument(..., min=0, help="Unit price"),
    description: str = typer.Option("", "--description", "-d", help="Product description"),
):
    """
    Add a product to your catalog.
    """
    session = require_session()
    product = {
        "user_id": session["user_id"],
        "username": session["username"],
        "name": name,
        "price": price,
        "description": description,
    }
    try:
        created = api_create_product(session["access_token"], session["username"], product)
    except ApiError as e:
        typer.echo(f"Failed to create product: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Product '{created['name']}' created with id {created['id']}.")


@app.command("update")
def update_product(
    product_id: str = typer.Argument(..., help="Product ID"),
    name: str = typer.Argument(..., help="New name"),
    price: float = typer.Argument(..., min=0, help="New unit price"),
    description: str = typer.Option(None, "--description", "-d", help="New description"),
):
    """
    Update one of your products.
    """
    session = require_session()
    product = {"user_id": session["user_id"], "name": name, "price": price}
    if description is not None:
        product["description"] = description
    try:
        updated = api_update_product(session["access_token"], session["username"], product_id, product)
    except ApiError as e:
        typer.echo(f"Failed to update product: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Product {updated['id']} updated: {updated['name']} at {updated['price']}.")


@app.command("delete")
def delete_product(
    product_id: str = typer.Argument(..., help="Product ID to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Delete one of your products.
    """
    session = require_session()

    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete product {product_id}?")
        if not confirm:
            typer.echo("Operation cancelled.")
            raise typer.Exit(code=0)

    try:
        api_delete_product(session["access_token"], session["username"], product_id, session["user_id"])
    except ApiError as e:
        typer.echo(f"Failed to delete product: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Product {product_id} deleted.")
